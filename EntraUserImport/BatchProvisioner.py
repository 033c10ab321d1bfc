# Entra User Import Tool - Batch Provisioner
# Last Update: October 17, 2026

import time

from EntraUserImport.UserImportModels import BatchSummary, Created, CreateUserRequest, Failed

progressActivity = "Creating users"


class BatchProvisioner:
    # *********
    # Creates one Entra user per record, in input order.  A failed record is
    # logged and skipped; it never stops the batch.
    # *********

    def __init__(self, session, reporter, settings, sleep=time.sleep):
        self.session = session
        self.reporter = reporter
        self.settings = settings
        self.sleep = sleep

    def provisionRecord(self, record):
        # *********
        # Attempts to create a single user.  Returns Created or Failed(reason).
        # Every error from the create call is a failure of this record only.
        # *********
        request = CreateUserRequest.fromRecord(record)
        try:
            self.session.createUser(request)
        except Exception as e:
            return Failed(str(e))
        return Created()

    def run(self, records):
        totalCount = len(records)
        createdCount = 0

        for index, record in enumerate(records, start=1):
            percent = round(createdCount / totalCount * 100, 2)
            self.reporter.showProgress(progressActivity, f"{percent}% complete", percent, f"Creating user: {record.displayName}")

            outcome = self.provisionRecord(record)
            if isinstance(outcome, Created):
                createdCount += 1
                self.reporter.log(f"Created user {record.displayName} ({record.userPrincipalName})", "INFO")
            else:
                self.reporter.log(f"Failed to create user {record.displayName} ({record.userPrincipalName}): {outcome.reason}", "ERROR")

            self.reporter.status(f"Created {createdCount} out of {totalCount} users")

            # Pause after every Nth successful creation, unless no record follows
            if isinstance(outcome, Created) and createdCount % self.settings.throttleEvery == 0 and index < totalCount:
                self.sleep(self.settings.throttlePauseSeconds)

        self.reporter.showProgress(progressActivity, "100% complete", 100, "Completed creating all users", completed=True)
        self.reporter.log(f"Completed creating {createdCount} users out of {totalCount} users.", "INFO")

        return BatchSummary(totalCount=totalCount, createdCount=createdCount)
