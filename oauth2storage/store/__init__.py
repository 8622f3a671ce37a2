"""
Store adapters to persist and retrieve the data an OAuth 2.0 authorization
server creates during the OAuth 2.0 process.

This module provides the base classes that define the storage contract.
:mod:`oauth2storage.store.mongodb` implements them on top of MongoDB.
"""


class ClientStore(object):
    """
    Base class for handling OAuth2 clients.
    """
    def create_client(self, client):
        """
        Stores a new client.

        :param client: An instance of :class:`oauth2storage.datatype.Client`.

        """
        raise NotImplementedError

    def get_client(self, client_id):
        """
        Retrieve a client by its identifier.

        :param client_id: Identifier of a client app.
        :return: An instance of :class:`oauth2storage.datatype.Client`.
        :raises: :class:`oauth2storage.error.ClientNotFoundError`

        """
        raise NotImplementedError

    def update_client(self, client):
        """
        Replaces the stored client having the same identifier.

        :param client: An instance of :class:`oauth2storage.datatype.Client`.
        :raises: :class:`oauth2storage.error.ClientNotFoundError`

        """
        raise NotImplementedError

    def delete_client(self, client):
        """
        Deletes the stored client having the same identifier.

        :param client: An instance of :class:`oauth2storage.datatype.Client`.
        :raises: :class:`oauth2storage.error.ClientNotFoundError`

        """
        raise NotImplementedError


class AuthorizeStore(object):
    """
    Base class for writing and retrieving an authorization code during the
    Authorization Code Grant flow.
    """
    def save_authorize(self, authorize_data):
        """
        Stores the data belonging to an authorization code.

        :param authorize_data: An instance of
                               :class:`oauth2storage.datatype.AuthorizeData`.

        """
        raise NotImplementedError

    def load_authorize(self, code):
        """
        Returns the data belonging to an authorization code.

        :param code: The authorization code.
        :return: An instance of :class:`oauth2storage.datatype.AuthorizeData`.
        :raises: :class:`oauth2storage.error.AuthCodeNotFound` if no data could
                 be retrieved for given code.

        """
        raise NotImplementedError

    def remove_authorize(self, code):
        """
        Deletes an authorization code after use.

        :param code: The authorization code.
        :raises: :class:`oauth2storage.error.AuthCodeNotFound`

        """
        raise NotImplementedError


class AccessStore(object):
    """
    Base class for persisting access tokens and refresh tokens.
    """
    def save_access(self, access_data):
        """
        Stores an access token and additional data.

        :param access_data: An instance of
                            :class:`oauth2storage.datatype.AccessData`.

        """
        raise NotImplementedError

    def load_by_access_token(self, access_token):
        """
        :return: An instance of :class:`oauth2storage.datatype.AccessData`.
        :raises: :class:`oauth2storage.error.AccessTokenNotFound`
        """
        raise NotImplementedError

    def load_by_refresh_token(self, refresh_token):
        """
        :return: An instance of :class:`oauth2storage.datatype.AccessData`.
        :raises: :class:`oauth2storage.error.AccessTokenNotFound`
        """
        raise NotImplementedError

    def remove_by_access_token(self, access_token):
        """
        :raises: :class:`oauth2storage.error.AccessTokenNotFound`
        """
        raise NotImplementedError

    def remove_by_refresh_token(self, refresh_token):
        """
        :raises: :class:`oauth2storage.error.AccessTokenNotFound`
        """
        raise NotImplementedError


class Storage(ClientStore, AuthorizeStore, AccessStore):
    """
    The complete storage contract an authorization server works with.
    """
    def clone(self):
        """
        Returns a storage to be used for the duration of one request.
        """
        return self

    def close(self):
        """
        Releases the resources the storage holds.
        """
        pass
