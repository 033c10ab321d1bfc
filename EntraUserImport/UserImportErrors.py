# Entra User Import Tool - Errors
# Last Update: October 17, 2026


class ImportStartupError(Exception):
    # *********
    # Raised before any user is processed.  Ends the run.
    # *********
    pass


class ConfigError(ImportStartupError):
    pass


class AuthError(ImportStartupError):
    pass


class SourceReadError(ImportStartupError):
    pass


class GraphRequestError(Exception):
    # *********
    # A single create-user call failed.  Only that user is affected.
    # *********

    def __init__(self, message, statusCode=None, responseText=""):
        super().__init__(message)
        self.statusCode = statusCode
        self.responseText = responseText

    def __str__(self):
        if self.statusCode is None:
            return self.args[0]
        return f"{self.args[0]}: {self.statusCode} - {self.responseText}"
