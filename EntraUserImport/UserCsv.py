# Entra User Import Tool - CSV Reader
# Last Update: October 17, 2026

import csv
import os

from EntraUserImport.UserImportErrors import SourceReadError
from EntraUserImport.UserImportModels import UserRecord

# CSV header -> UserRecord field
csvColumns = {
    "DisplayName": "displayName",
    "UserPrincipalName": "userPrincipalName",
    "Password": "password",
    "First Name": "givenName",
    "Last Name": "surname",
    "Job title": "jobTitle",
    "Department": "department",
    "Usage location": "usageLocation",
    "State": "state",
    "Country": "country",
    "Office Location": "officeLocation",
    "City": "city",
    "Postal Code": "postalCode"
}

requiredColumns = ("DisplayName", "UserPrincipalName", "Password")


def readUserCsv(csvPath):
    #######
    # Read every user row of the CSV file into memory
    #######

    if not os.path.isfile(csvPath):
        raise SourceReadError(f"CSV file not found at {csvPath}.")

    try:
        with open(csvPath, 'r', newline='', encoding='utf-8-sig') as csvFile:
            csvFileReader = csv.reader(csvFile)
            headers = [header.strip() for header in next(csvFileReader, [])]

            missing = [column for column in requiredColumns if column not in headers]
            if missing:
                raise SourceReadError(f"CSV file {csvPath} is missing required column(s): {', '.join(missing)}")

            # Precomputing indexes to prevent repeated lookups
            headerIndexes = {header: idx for idx, header in enumerate(headers) if header in csvColumns}

            userRecords = []
            for row in csvFileReader:
                if not any(field.strip() for field in row):
                    continue
                values = {}
                for header, idx in headerIndexes.items():
                    value = row[idx] if idx < len(row) else ""
                    # Passwords are sent exactly as written
                    values[csvColumns[header]] = value if header == "Password" else value.strip()
                userRecords.append(UserRecord(**values))
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise SourceReadError(f"Error reading CSV file {csvPath}: {e}") from e

    if not userRecords:
        raise SourceReadError(f"CSV file {csvPath} contains no user rows.")

    return userRecords
