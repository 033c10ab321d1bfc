# Entra User Import Tool
# Last Update: October 17, 2026

import argparse
import configparser
import os
import sys
import time

from EntraUserImport import version
from EntraUserImport.BatchProvisioner import BatchProvisioner
from EntraUserImport.GraphSession import GraphSession, clouds
from EntraUserImport.UserCsv import readUserCsv
from EntraUserImport.UserImportErrors import ConfigError, ImportStartupError
from EntraUserImport.UserImportModels import ImportSettings
from EntraUserImport.UserImportReporter import Reporter, failureLogFileName, logFileName

configFileName = "EntraImportUser.cfg"


def printWelcome(version, reporter):
    #######
    # Print the welcome message
    #######

    startTime = int(time.time() * 1000)

    print(f'')
    print(f'********************************************')
    print(f'Entra User Import Utility - version {version}')
    print(f'********************************************')
    print(f'')
    print(f'Actions will be written to the log file {logFileName}')
    print(f'')
    reporter.info(f"Entra User Import Utility - version {version}")
    reporter.info(f"Starting import tool: {startTime}")

    return startTime


def readConfigurationFile(configPath, reporter):
    #######
    # Read the configuration file written by the configuration utility
    #######

    reporter.info(f"Reading config file: {configPath}")

    if not os.path.isfile(configPath):
        raise ConfigError(f"Configuration file {configPath} not found - please run the configuration utility to create it.")

    configFile = configparser.ConfigParser(interpolation=None)
    try:
        configFile.read(configPath)
    except configparser.Error as e:
        raise ConfigError(f"Error reading configuration file: {e}") from e

    if "General" not in configFile.sections():
        raise ConfigError("Missing General section in configuration file - please re-run configuration utility.")
    if "version" not in configFile["General"]:
        raise ConfigError("Missing required fields in General section of configuration file - please re-run configuration utility.")

    checkVersion(configFile["General"]["version"], version, reporter)

    if "GraphConfig" not in configFile.sections():
        raise ConfigError("Missing GraphConfig section in configuration file - please re-run configuration utility.")

    graphConfig = configFile["GraphConfig"]
    for field in ("tenantid", "clientid", "clienttype", "cloud"):
        if field not in graphConfig:
            raise ConfigError("Missing required fields in GraphConfig section of configuration file - please re-run configuration utility.")

    if graphConfig["cloud"] not in clouds:
        raise ConfigError(f"Unknown cloud '{graphConfig['cloud']}' in configuration file - please re-run configuration utility.")
    if graphConfig["clienttype"] == "secret" and not graphConfig.get("clientsecret"):
        raise ConfigError("Client type is secret but no client secret is configured - please re-run configuration utility.")

    reporter.info(f"Configuration file read successfully.")

    return ImportSettings(
        tenantId=graphConfig["tenantid"],
        clientId=graphConfig["clientid"],
        clientSecret=graphConfig.get("clientsecret", ""),
        clientType=graphConfig["clienttype"],
        cloud=graphConfig["cloud"]
    )


def checkVersion(configVersion, version, reporter):
    #######
    # Check the version
    #######

    if configVersion != version:
        raise ConfigError(f"Configuration file version {configVersion} does not match utility version {version} - please re-run the configuration utility.")
    reporter.info(f"Configuration file version validated - matches configuration version: {version}")


def printEnding(startTime, endTime, reporter):
    #######
    # Print the ending message
    #######

    print(f'')
    print(f'Entra User Import Utility - Ending')
    print(f'')
    reporter.info(f"Ending import tool: {endTime}")

    totalTime = endTime - startTime
    reporter.info(f"Total time taken: {totalTime} ms")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Create Entra ID users from a CSV file.")
    parser.add_argument("csvPath", help="path to the user CSV file")
    args = parser.parse_args(argv)

    reporter = Reporter(logFileName, failureLogFileName)
    try:
        startTime = printWelcome(version, reporter)

        try:
            settings = readConfigurationFile(configFileName, reporter)
            session = GraphSession.connect(settings, reporter)
            records = readUserCsv(args.csvPath)
        except ImportStartupError as e:
            reporter.error(f"Error: {e}")
            return 1

        reporter.info(f"Read {len(records)} users from {args.csvPath}")
        BatchProvisioner(session, reporter, settings).run(records)

        endTime = int(time.time() * 1000)
        printEnding(startTime, endTime, reporter)
        return 0
    finally:
        reporter.close()


if __name__ == "__main__":
    sys.exit(main())
