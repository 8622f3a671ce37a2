# -*- coding: utf-8 -*-
"""
Definitions of the records persisted by the stores.
"""

from datetime import datetime, timedelta, timezone


def utcnow():
    return datetime.now(timezone.utc)


def _expire_at(created_at, expires_in):
    # Drivers may hand back naive datetimes, those are always UTC.
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)

    return created_at + timedelta(seconds=expires_in)


class Record(object):
    """
    Base class of all records. Two records are equal if all their attributes
    are equal.
    """
    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.__dict__ == other.__dict__

    def __repr__(self):
        attributes = ", ".join("%s=%r" % item
                               for item in sorted(self.__dict__.items()))
        return "%s(%s)" % (self.__class__.__name__, attributes)


class Client(Record):
    """
    Representation of a client application.
    """
    def __init__(self, identifier, secret, redirect_uri, user_data=None):
        self.identifier = identifier
        self.secret = secret
        self.redirect_uri = redirect_uri
        self.user_data = user_data

    def client_secret_matches(self, secret):
        """
        Checks if a secret is the one of the client.

        :param secret: The secret sent by the client app.

        :return: Boolean
        """
        return self.secret == secret


class AuthorizeData(Record):
    """
    Holds an authorization code and additional information.

    The ``client`` is embedded into the stored document when the code is
    saved. It is replaced by the current state of the client when the code is
    loaded again.
    """
    def __init__(self, client, code, expires_in, redirect_uri,
                 created_at=None, scope="", state="", user_data=None,
                 code_challenge="", code_challenge_method=""):
        self.client = client
        self.code = code
        self.expires_in = expires_in
        self.redirect_uri = redirect_uri
        self.created_at = created_at if created_at is not None else utcnow()
        self.scope = scope
        self.state = state
        self.user_data = user_data
        self.code_challenge = code_challenge
        self.code_challenge_method = code_challenge_method

    def expire_at(self):
        """
        Returns the point in time at which the code expires.
        """
        return _expire_at(self.created_at, self.expires_in)

    def is_expired(self):
        """
        Determines if the code has expired.

        :return: `True` if the code has expired. Otherwise `False`.
        """
        return self.expire_at() < utcnow()


class AccessData(Record):
    """
    An access token, its optional refresh token and associated data.
    """
    def __init__(self, client, access_token, expires_in, authorize_data=None,
                 refresh_token=None, created_at=None, scope="",
                 redirect_uri="", user_data=None):
        self.client = client
        self.authorize_data = authorize_data
        self.access_token = access_token
        self.refresh_token = refresh_token
        self.expires_in = expires_in
        self.created_at = created_at if created_at is not None else utcnow()
        self.scope = scope
        self.redirect_uri = redirect_uri
        self.user_data = user_data

    def expire_at(self):
        """
        Returns the point in time at which the access token expires.
        """
        return _expire_at(self.created_at, self.expires_in)

    def is_expired(self):
        """
        Determines if the access token has expired.

        :return: `True` if the token has expired. Otherwise `False`.
        """
        return self.expire_at() < utcnow()
