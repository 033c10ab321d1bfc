# Entra User Import Tool - Data Models
# Last Update: October 17, 2026

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class UserRecord:
    # *********
    # One row of the user CSV file.  Read-only once parsed.
    # *********
    displayName: str
    userPrincipalName: str
    password: str
    givenName: str = ""
    surname: str = ""
    jobTitle: str = ""
    department: str = ""
    usageLocation: str = ""
    officeLocation: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    postalCode: str = ""


def getMailNickname(userPrincipalName):
    # *********
    # Returns the part of the user principal name before the first "@".
    # A value with no "@" is passed through whole; Graph rejects it if invalid.
    # *********
    return userPrincipalName.split("@", 1)[0]


@dataclass(frozen=True)
class PasswordProfile:
    password: str
    forceChangePasswordNextSignIn: bool


@dataclass(frozen=True)
class CreateUserRequest:
    # *********
    # Body of a Graph create-user call.  Every field is required at construction.
    # *********
    accountEnabled: bool
    displayName: str
    mailNickname: str
    userPrincipalName: str
    passwordProfile: PasswordProfile
    givenName: str
    surname: str
    jobTitle: str
    department: str
    usageLocation: str
    officeLocation: str
    city: str
    state: str
    country: str
    postalCode: str

    @classmethod
    def fromRecord(cls, record):
        return cls(
            accountEnabled=True,
            displayName=record.displayName,
            mailNickname=getMailNickname(record.userPrincipalName),
            userPrincipalName=record.userPrincipalName,
            passwordProfile=PasswordProfile(
                password=record.password,
                forceChangePasswordNextSignIn=True
            ),
            givenName=record.givenName,
            surname=record.surname,
            jobTitle=record.jobTitle,
            department=record.department,
            usageLocation=record.usageLocation,
            officeLocation=record.officeLocation,
            city=record.city,
            state=record.state,
            country=record.country,
            postalCode=record.postalCode
        )

    def toJson(self):
        # *********
        # Renders the Graph JSON body.  Empty optional profile properties are left out.
        # *********
        user = {
            "accountEnabled": self.accountEnabled,
            "displayName": self.displayName,
            "mailNickname": self.mailNickname,
            "userPrincipalName": self.userPrincipalName,
            "passwordProfile": {
                "password": self.passwordProfile.password,
                "forceChangePasswordNextSignIn": self.passwordProfile.forceChangePasswordNextSignIn
            }
        }

        optionalFields = {
            "givenName": self.givenName,
            "surname": self.surname,
            "jobTitle": self.jobTitle,
            "department": self.department,
            "usageLocation": self.usageLocation,
            "officeLocation": self.officeLocation,
            "city": self.city,
            "state": self.state,
            "country": self.country,
            "postalCode": self.postalCode
        }
        for name, value in optionalFields.items():
            if value:
                user[name] = value

        return user


@dataclass(frozen=True)
class Created:
    pass


@dataclass(frozen=True)
class Failed:
    reason: str


ProvisionOutcome = Union[Created, Failed]


@dataclass(frozen=True)
class BatchSummary:
    totalCount: int
    createdCount: int


@dataclass(frozen=True)
class ImportSettings:
    # *********
    # Everything a run needs, read once from the configuration file.
    # *********
    tenantId: str
    clientId: str
    clientSecret: str = ""
    clientType: str = "secret"
    cloud: str = "global"
    throttleEvery: int = 20
    throttlePauseSeconds: float = 3
