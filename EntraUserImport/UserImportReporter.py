# Entra User Import Tool - Reporter
# Last Update: October 17, 2026

import logging
import os
import sys

logFileName = "EntraImportUser.log"
failureLogFileName = "EntraImportUserFailuresDetail.log"

logFormat = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")

logLevels = {
    "INFO": logging.INFO,
    "ERROR": logging.ERROR
}


class Reporter:
    # *********
    # Writes log lines to the import log (mirrored to the console) and shows
    # progress on the console.  ERROR lines also go to the failure detail log.
    # *********

    def __init__(self, logPath, failureLogPath):
        self.logPath = logPath
        self.failureLogPath = failureLogPath

        self.logger = logging.getLogger(f"entraImport.{os.path.abspath(logPath)}")
        self.logger.setLevel(logging.INFO)
        self.logger.propagate = False

        # Setup info logging
        handler = logging.FileHandler(logPath)
        handler.setFormatter(logFormat)
        handler.setLevel(logging.INFO)
        self.logger.addHandler(handler)

        # Setup error logging
        handler = logging.FileHandler(failureLogPath)
        handler.setFormatter(logFormat)
        handler.setLevel(logging.ERROR)
        self.logger.addHandler(handler)

        # Mirror to the console
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logFormat)
        handler.setLevel(logging.INFO)
        self.logger.addHandler(handler)

    def log(self, message, level="INFO"):
        if level not in logLevels:
            raise ValueError(f"Unsupported log level: {level}")
        self.logger.log(logLevels[level], message)

    def info(self, message):
        self.log(message, "INFO")

    def error(self, message):
        self.log(message, "ERROR")

    def showProgress(self, activity, status, percent, currentOperation, completed=False):
        if completed:
            print(f'{activity} - {status} [{percent}%] - {currentOperation} - done')
        else:
            print(f'{activity} - {status} [{percent}%] - {currentOperation}')

    def status(self, message):
        print(message)

    def close(self):
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()


class ConsoleReporter:
    # *********
    # Console-only stand-in used by the configuration utility, which keeps no log file.
    # *********

    def info(self, message):
        print(message)