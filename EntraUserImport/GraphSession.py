# Entra User Import Tool - Microsoft Graph Session
# Last Update: October 17, 2026

import base64
import json
import time

import requests

from EntraUserImport.UserImportErrors import AuthError, ConfigError, GraphRequestError

# login host, graph host
clouds = {
    "global": ("login.microsoftonline.com", "graph.microsoft.com"),
    "usgov": ("login.microsoftonline.us", "graph.microsoft.us"),
    "china": ("login.chinacloudapi.cn", "microsoftgraph.chinacloudapi.cn")
}

defaultScopes = ("User.ReadWrite.All",)
deviceCodeGrant = "urn:ietf:params:oauth:grant-type:device_code"


def getCloudHosts(cloud):
    # *********
    # Returns the (login host, graph host) pair for a national cloud.
    # *********
    if cloud not in clouds:
        raise ConfigError(f"Unknown cloud '{cloud}' - expected one of: {', '.join(clouds)}")
    return clouds[cloud]


def readResponseField(response, field, description):
    # *********
    # Reads one field of a JSON response body.  A non-JSON body or missing field is a sign-in failure.
    # *********
    try:
        return response.json()[field]
    except (ValueError, KeyError, TypeError) as e:
        raise AuthError(f"Unexpected {description} response: {response.status_code} - {response.text}") from e


def getClientCredentialsToken(settings, loginHost, graphHost):
    # *********
    # Gets an application access token with the client credentials grant.
    # *********
    requestHeaders = {}
    requestHeaders['Content-Type'] = 'application/x-www-form-urlencoded'
    requestBody = {}
    requestBody['client_id'] = settings.clientId
    requestBody['client_secret'] = settings.clientSecret
    requestBody['scope'] = f"https://{graphHost}/.default"
    requestBody['grant_type'] = 'client_credentials'

    try:
        response = requests.post(f"https://{loginHost}/{settings.tenantId}/oauth2/v2.0/token", headers=requestHeaders, data=requestBody)
    except requests.exceptions.RequestException as e:
        raise AuthError(f"Error connecting to Microsoft identity platform: {e}") from e

    if response.status_code != 200:
        raise AuthError(f"Error getting access token: {response.status_code} - {response.text}")
    return readResponseField(response, 'access_token', "access token")


def getDeviceCodeToken(settings, loginHost, graphHost, scopes, reporter, sleep=time.sleep):
    # *********
    # Gets a delegated access token with the device authorization grant.
    # The operator signs in on another device while the token endpoint is polled.
    # *********
    requestHeaders = {}
    requestHeaders['Content-Type'] = 'application/x-www-form-urlencoded'
    requestBody = {}
    requestBody['client_id'] = settings.clientId
    requestBody['scope'] = " ".join(f"https://{graphHost}/{scope}" for scope in scopes)

    try:
        response = requests.post(f"https://{loginHost}/{settings.tenantId}/oauth2/v2.0/devicecode", headers=requestHeaders, data=requestBody)
    except requests.exceptions.RequestException as e:
        raise AuthError(f"Error connecting to Microsoft identity platform: {e}") from e

    if response.status_code != 200:
        raise AuthError(f"Error requesting device code: {response.status_code} - {response.text}")

    try:
        deviceCode = response.json()
        deviceCodeValue = deviceCode['device_code']
        signInMessage = deviceCode['message']
        verificationUri = deviceCode['verification_uri']
        interval = int(deviceCode.get('interval', 5))
        expiresIn = int(deviceCode.get('expires_in', 900))
    except (ValueError, KeyError, TypeError, AttributeError) as e:
        raise AuthError(f"Unexpected device code response: {response.status_code} - {response.text}") from e
    waited = 0

    print(f'')
    print(f'{signInMessage}')
    print(f'')
    reporter.info(f"Waiting for device code sign-in at {verificationUri}")

    pollBody = {}
    pollBody['grant_type'] = deviceCodeGrant
    pollBody['client_id'] = settings.clientId
    pollBody['device_code'] = deviceCodeValue

    while waited < expiresIn:
        sleep(interval)
        waited += interval
        try:
            pollResponse = requests.post(f"https://{loginHost}/{settings.tenantId}/oauth2/v2.0/token", headers=requestHeaders, data=pollBody)
        except requests.exceptions.RequestException as e:
            raise AuthError(f"Error connecting to Microsoft identity platform: {e}") from e

        if pollResponse.status_code == 200:
            return readResponseField(pollResponse, 'access_token', "access token")

        try:
            error = pollResponse.json().get('error', '')
        except (ValueError, AttributeError):
            error = ""
        if error == "authorization_pending":
            continue
        if error == "slow_down":
            interval += 5
            continue
        raise AuthError(f"Device code sign-in failed: {pollResponse.status_code} - {pollResponse.text}")

    raise AuthError("Device code sign-in expired before it was completed.")


def readTokenClaims(accessToken):
    # *********
    # Decodes the claims section of a JWT access token.  The signature is not checked.
    # *********
    if not isinstance(accessToken, str):
        raise AuthError("Access token is not a JWT.")
    parts = accessToken.split(".")
    if len(parts) != 3:
        raise AuthError("Access token is not a JWT.")

    payload = parts[1] + "=" * (-len(parts[1]) % 4)
    try:
        claims = json.loads(base64.urlsafe_b64decode(payload.encode("ascii")))
    except ValueError as e:
        raise AuthError(f"Unable to read access token claims: {e}") from e
    if not isinstance(claims, dict):
        raise AuthError("Unable to read access token claims.")
    return claims


def checkTokenScopes(claims, scopes):
    # *********
    # Application tokens carry "roles", delegated tokens carry "scp".
    # *********
    granted = set(claims.get("roles", []))
    granted.update(claims.get("scp", "").split())
    missing = [scope for scope in scopes if scope not in granted]
    if missing:
        raise AuthError(f"Access token is missing required permission(s): {', '.join(missing)}")


class GraphSession:
    # *********
    # An authenticated handle on Microsoft Graph.  Obtained once, never refreshed.
    # *********

    def __init__(self, accessToken, graphHost):
        self.accessToken = accessToken
        self.graphHost = graphHost

    @classmethod
    def connect(cls, settings, reporter, scopes=defaultScopes, sleep=time.sleep):
        loginHost, graphHost = getCloudHosts(settings.cloud)

        tokenTime = int(time.time() * 1000)
        reporter.info(f"Getting access token from {loginHost} at {tokenTime}.")

        if settings.clientType == "secret":
            accessToken = getClientCredentialsToken(settings, loginHost, graphHost)
        elif settings.clientType == "devicecode":
            accessToken = getDeviceCodeToken(settings, loginHost, graphHost, scopes, reporter, sleep)
        else:
            raise ConfigError(f"Unknown client type '{settings.clientType}' - expected secret or devicecode")

        checkTokenScopes(readTokenClaims(accessToken), scopes)
        reporter.info(f"Connected to {graphHost} with permission(s): {', '.join(scopes)}")
        return cls(accessToken, graphHost)

    def createUser(self, request):
        # *********
        # Creates one user.  Raises GraphRequestError on any failure.  The 201 body is not read.
        # *********
        requestHeaders = {
            'Authorization': f'Bearer {self.accessToken}',
            'Content-Type': 'application/json'
        }

        try:
            createResponse = requests.post(
                f"https://{self.graphHost}/v1.0/users",
                headers=requestHeaders,
                json=request.toJson()
            )
        except requests.exceptions.RequestException as e:
            raise GraphRequestError(f"Error connecting to Microsoft Graph: {e}") from e

        if createResponse.status_code != 201:
            raise GraphRequestError("Graph rejected the request", createResponse.status_code, createResponse.text)
