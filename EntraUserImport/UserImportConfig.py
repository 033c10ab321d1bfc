# Entra User Import Tool - Configurator
# Last Update: October 17, 2026

import configparser
import os
import re

import pwinput

from EntraUserImport import version
from EntraUserImport.GraphSession import GraphSession, clouds
from EntraUserImport.UserImport import configFileName
from EntraUserImport.UserImportErrors import ImportStartupError
from EntraUserImport.UserImportModels import ImportSettings
from EntraUserImport.UserImportReporter import ConsoleReporter

guidFormat = r"^[a-fA-F0-9]{8}-[a-fA-F0-9]{4}-[a-fA-F0-9]{4}-[a-fA-F0-9]{4}-[a-fA-F0-9]{12}$"
clientTypes = ("secret", "devicecode")


def printWelcome(version):
    # *********
    # Prints a welcome message and instructions for the configuration tool.
    # *********
    print(f'')
    print(f'')
    print(f'********************************************')
    print(f'Entra User Import Utility - version {version}')
    print(f'Configuration Tool')
    print(f'********************************************')
    print(f'')
    print(f'This tool will walk you through the configuration of the User Import Tool.  You will need the following:')
    print(f'1) Your Entra tenant ID')
    print(f'2) Your Microsoft cloud (global, usgov, china)')
    print(f'3) An app registration client ID, and a client secret unless you sign in with a device code')
    print(f'4) The User.ReadWrite.All permission granted to that app registration')
    print(f'')


def printRetry(message):
    print(f'')
    print(f'*' * len(message))
    print(message)
    print(f'*' * len(message))
    print(f'')


def getGuid(prompt):
    # *********
    # Prompts until a value in GUID format is entered.
    # *********
    while True:
        getValue = input(f'{prompt} (format: aaaaaaaa-bbbb-cccc-dddd-eeeeeeeeeeee):').strip()
        if re.match(guidFormat, getValue):
            print(f'')
            return getValue.lower()
        printRetry(f'Error: The format of the value is invalid, please retry.')


def getChoice(prompt, choices, default):
    # *********
    # Prompts until one of the allowed choices is entered.  Blank input takes the default.
    # *********
    while True:
        getValue = input(f'{prompt} ({", ".join(choices)}): [{default}] ').strip().lower()
        if not getValue:
            return default
        if getValue in choices:
            print(f'')
            return getValue
        printRetry(f"Invalid choice, please retry.")


def getClientSecret():
    # *********
    # Prompts the user for the client secret securely.
    # *********
    getSecret = pwinput.pwinput(prompt='What is your client secret? :', mask='*')
    print(f'')
    return getSecret


def getSettings():
    tenantId = getGuid('What is your Entra tenant ID?')
    cloud = getChoice('Which Microsoft cloud is your tenant in?', tuple(clouds), "global")
    clientId = getGuid('What is your app registration client ID?')
    clientType = getChoice('How should the import tool sign in?', clientTypes, "secret")
    clientSecret = getClientSecret() if clientType == "secret" else ""

    return ImportSettings(
        tenantId=tenantId,
        clientId=clientId,
        clientSecret=clientSecret,
        clientType=clientType,
        cloud=cloud
    )


def performClientTest(settings, reporter):
    # *********
    # Attempts to connect to Microsoft Graph with the entered settings.
    # *********
    print(f'Checking client credentials with Microsoft Graph.')
    print(f'')
    try:
        GraphSession.connect(settings, reporter)
    except ImportStartupError as e:
        printRetry(f'Failed to connect with the provided settings: {e}')
        return False
    print(f'Client connection validated.')
    print(f'')
    return True


def writeConfigFile(version, workingDirectory, settings):
    # *********
    # Writes the configuration details to a config file in the working directory.
    # *********
    configFile = configparser.ConfigParser(interpolation=None)

    configFile['General'] = {'version': version, 'workingDirectory': workingDirectory}
    configFile['GraphConfig'] = {
        'tenantId': settings.tenantId,
        'clientId': settings.clientId,
        'clientSecret': settings.clientSecret,
        'clientType': settings.clientType,
        'cloud': settings.cloud
    }
    configPath = os.path.join(workingDirectory, configFileName)
    with open(configPath, "w") as cfgFile:
        configFile.write(cfgFile)
    return configPath


def main():
    # *********
    # Runs the configuration workflow for the Entra User Import Tool.
    # *********
    workingDirectory = os.getcwd()
    reporter = ConsoleReporter()

    printWelcome(version)
    print(f'Writing configuration file to: {os.path.join(workingDirectory, configFileName)}')
    print(f'')

    settings = getSettings()
    while not performClientTest(settings, reporter):
        settings = getSettings()

    configPath = writeConfigFile(version, workingDirectory, settings)
    print("All configuration complete - the configuration file has been written to :")
    print(configPath)


if __name__ == "__main__":
    main()
