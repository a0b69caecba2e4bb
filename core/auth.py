"""
OAuth 1.0a authentication for Telldus Live.

Provides the signed HTTP client used for every API call and the three-legged
flow (request token, user authorisation, access token) that produces the
credentials stored in auth.yml.
"""

import logging

import requests
from requests_oauthlib import OAuth1Session
from requests_oauthlib.oauth1_session import (
    TokenMissing,
    TokenRequestDenied,
    VerifierMissing,
)

from core.config import SERVICE_OPTIONS
from core.errors import ApiError, TransportError
from models.types import Credentials, ServiceOptions

_LOGGER = logging.getLogger(__name__)


class SignedClient:
    """Issues OAuth 1.0a signed GET requests against the Telldus Live site."""

    def __init__(self, credentials: Credentials, options: ServiceOptions = SERVICE_OPTIONS,
                 session: OAuth1Session | None = None):
        """Initialise the signed client.

        Args:
            credentials: Consumer and access token secrets used for signing
            options: API site and timeout
            session: Pre-built session (mainly for tests); built from credentials if omitted
        """
        self.options = options
        self.session = session or OAuth1Session(
            credentials.consumer_key,
            client_secret=credentials.consumer_secret,
            resource_owner_key=credentials.token,
            resource_owner_secret=credentials.token_secret,
        )

    def get(self, path: str) -> requests.Response:
        """Sign and execute a GET for a site-relative path.

        Raises:
            TransportError: If the server could not be reached
        """
        url = f"{self.options.site}{path}"
        _LOGGER.debug("GET %s", url)
        try:
            response = self.session.get(url, timeout=self.options.timeout, allow_redirects=False)
        except requests.exceptions.RequestException as e:
            raise TransportError(None, str(e))
        _LOGGER.debug("%s %s for %s", response.status_code, response.reason, url)
        return response


class AuthorizationFlow:
    """Three-legged OAuth 1.0a flow for obtaining an access token.

    Usage:
        flow = AuthorizationFlow(consumer_key, consumer_secret)
        url = flow.start()            # send the user here
        credentials = flow.finish(verifier_or_redirect_url)
    """

    def __init__(self, consumer_key: str, consumer_secret: str,
                 options: ServiceOptions = SERVICE_OPTIONS,
                 session: OAuth1Session | None = None):
        self.consumer_key = consumer_key
        self.consumer_secret = consumer_secret
        self.options = options
        self.session = session or OAuth1Session(consumer_key, client_secret=consumer_secret)

    def start(self) -> str:
        """Fetch a request token and return the URL the user must visit."""
        self._token_call(self.session.fetch_request_token, self.options.request_token_url)
        return self.session.authorization_url(self.options.authorize_url)

    def finish(self, verifier: str) -> Credentials:
        """Exchange the authorised request token for an access token.

        Args:
            verifier: The oauth_verifier code, or the full redirect URL containing it
        """
        verifier = verifier.strip()
        if verifier.startswith('http'):
            self.session.parse_authorization_response(verifier)
            verifier = None

        tokens = self._token_call(self.session.fetch_access_token,
                                  self.options.access_token_url, verifier=verifier)

        return Credentials(
            consumer_key=self.consumer_key,
            consumer_secret=self.consumer_secret,
            token=tokens['oauth_token'],
            token_secret=tokens['oauth_token_secret'],
        )

    def _token_call(self, method, url: str, **kwargs) -> dict:
        """Run a token endpoint call, translating library errors."""
        _LOGGER.debug("Token request to %s", url)
        try:
            return method(url, **kwargs)
        except TokenRequestDenied as e:
            raise TransportError(e.status_code, f"token request to {url} denied")
        except TokenMissing as e:
            raise ApiError(f"no token in response from {url}: {e.response}")
        except VerifierMissing:
            raise ApiError("no verifier supplied for the access token request")
        except requests.exceptions.RequestException as e:
            raise TransportError(None, str(e))
