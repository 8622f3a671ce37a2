"""
Store adapters to read/write data to from/to mongodb using pymongo.
"""

import logging
from contextlib import contextmanager

from pymongo import MongoClient
from pymongo.errors import ConnectionFailure, PyMongoError

from oauth2storage import store
from oauth2storage.config import Settings
from oauth2storage.document import access_from_document, \
    access_to_document, authorize_from_document, authorize_to_document, \
    client_from_document, client_reference, client_to_document, \
    embedded_authorize_data, optional_client_reference
from oauth2storage.error import AccessTokenNotFound, AuthCodeNotFound, \
    ClientNotFoundError, StorageConnectionError, StorageError
from oauth2storage.monitoring import CommandLogger

logger = logging.getLogger(__name__)

ACCESS_TOKEN_FIELD = "access_token"
REFRESH_TOKEN_FIELD = "refresh_token"

DEFAULT_COLLECTIONS = {"clients": "oauth_clients",
                       "authorize": "oauth_authorize_data",
                       "access": "oauth_access_data"}


@contextmanager
def translate_errors(operation, collection_name):
    """
    Re-raises exceptions of pymongo as a
    :class:`oauth2storage.error.StorageError`.
    """
    try:
        yield
    except ConnectionFailure as e:
        raise StorageConnectionError("%s on %s failed: %s"
                                     % (operation, collection_name, e)) from e
    except PyMongoError as e:
        raise StorageError("%s on %s failed: %s"
                           % (operation, collection_name, e)) from e


class MongodbStore(object):
    """
    Base class extended by all concrete store adapters.
    """

    def __init__(self, collection):
        self.collection = collection

    def _find_one(self, query):
        logger.debug("Querying %s", self.collection.name)

        with translate_errors("find", self.collection.name):
            with self.collection.find(query, limit=1) as cursor:
                for document in cursor:
                    return document
        return None

    def _insert(self, document):
        with translate_errors("insert", self.collection.name):
            self.collection.insert_one(document)

    def _replace(self, query, document):
        with translate_errors("replace", self.collection.name):
            return self.collection.replace_one(query, document).matched_count

    def _delete(self, query):
        with translate_errors("delete", self.collection.name):
            return self.collection.delete_one(query).deleted_count


class ClientResolvingStore(MongodbStore):
    """
    Base class of stores whose documents embed a client.
    """

    def __init__(self, collection, client_store):
        super(ClientResolvingStore, self).__init__(collection)
        self.client_store = client_store

    def _resolve_client(self, document, reference=client_reference):
        """
        Fetches the current state of the client embedded in ``document``.

        :param reference: Function that extracts the client identifier from
                          the document. If it returns ``None`` no client gets
                          resolved.
        """
        client_id = reference(document)

        if client_id is None:
            return None

        return self.client_store.get_client(client_id)


class ClientStore(store.ClientStore, MongodbStore):
    """
    Create a new instance like this::

        from pymongo import MongoClient

        client = MongoClient('localhost', 27017)

        db = client.test_database

        client_store = ClientStore(collection=db["oauth_clients"])

    """

    def create_client(self, client):
        logger.debug("Creating client %s", client.identifier)

        self._insert(client_to_document(client))

    def get_client(self, client_id):
        client_data = self._find_one({"identifier": client_id})

        if client_data is None:
            raise ClientNotFoundError(client_id)

        return client_from_document(client_data)

    def update_client(self, client):
        logger.debug("Updating client %s", client.identifier)

        matched = self._replace({"identifier": client.identifier},
                                client_to_document(client))

        if matched == 0:
            raise ClientNotFoundError(client.identifier)

    def delete_client(self, client):
        logger.debug("Deleting client %s", client.identifier)

        if self._delete({"identifier": client.identifier}) == 0:
            raise ClientNotFoundError(client.identifier)


class AuthorizeStore(store.AuthorizeStore, ClientResolvingStore):
    """
    Create a new instance like this::

        authorize_store = AuthorizeStore(
            collection=db["oauth_authorize_data"],
            client_store=ClientStore(collection=db["oauth_clients"]))

    """

    def save_authorize(self, authorize_data):
        logger.debug("Saving authorization code of client %s",
                     getattr(authorize_data.client, "identifier", None))

        self._insert(authorize_to_document(authorize_data))

    def load_authorize(self, code):
        code_data = self._find_one({"code": code})

        if code_data is None:
            raise AuthCodeNotFound(code)

        return authorize_from_document(code_data,
                                       self._resolve_client(code_data))

    def remove_authorize(self, code):
        logger.debug("Removing authorization code")

        if self._delete({"code": code}) == 0:
            raise AuthCodeNotFound(code)


class AccessStore(store.AccessStore, ClientResolvingStore):
    """
    Stores access tokens together with their refresh token. A record can be
    looked up and removed by either of the two tokens.

    Create a new instance like this::

        access_store = AccessStore(
            collection=db["oauth_access_data"],
            client_store=ClientStore(collection=db["oauth_clients"]))

    """

    def save_access(self, access_data):
        logger.debug("Saving access data of client %s",
                     access_data.client.identifier)

        self._insert(access_to_document(access_data))

    def load_by_access_token(self, access_token):
        return self._load_access(ACCESS_TOKEN_FIELD, access_token)

    def load_by_refresh_token(self, refresh_token):
        return self._load_access(REFRESH_TOKEN_FIELD, refresh_token)

    def remove_by_access_token(self, access_token):
        self._remove_access(ACCESS_TOKEN_FIELD, access_token)

    def remove_by_refresh_token(self, refresh_token):
        self._remove_access(REFRESH_TOKEN_FIELD, refresh_token)

    def _load_access(self, field, token):
        # A null filter would match documents lacking the field.
        if token is None:
            raise AccessTokenNotFound(token)

        data = self._find_one({field: token})

        if data is None:
            raise AccessTokenNotFound(token)

        client = self._resolve_client(data)

        authorize_data = None
        authorize_document = embedded_authorize_data(data)
        if authorize_document is not None:
            authorize_data = authorize_from_document(
                authorize_document,
                self._resolve_client(authorize_document,
                                     optional_client_reference))

        return access_from_document(data, client, authorize_data)

    def _remove_access(self, field, token):
        logger.debug("Removing access data by %s", field)

        if token is None:
            raise AccessTokenNotFound(token)

        if self._delete({field: token}) == 0:
            raise AccessTokenNotFound(token)


class MongodbStorage(store.Storage):
    """
    All stores sharing one database.

    Pass a database object::

        from pymongo import MongoClient

        storage = MongodbStorage(db=MongoClient()["oauth2"])

    or let the storage create the client. Keyword arguments not consumed by
    the storage are passed on to ``MongoClient``::

        storage = MongodbStorage(host="mongodb://127.0.0.1:27017",
                                 database="oauth2", driver_log_level="DEBUG")

    :param collections: A ``dict`` overriding the names of the ``clients``,
                        ``authorize`` and ``access`` collections.
    :param driver_log_level: Log every command the driver sends at this level.
                             Only available if the storage creates the client.
    """

    def __init__(self, db=None, database="oauth2", collections=None,
                 driver_log_level=None, **kwargs):
        self.client = None

        if db is None:
            if driver_log_level is not None:
                listeners = list(kwargs.pop("event_listeners", []))
                listeners.append(CommandLogger(driver_log_level))
                kwargs["event_listeners"] = listeners

            kwargs.setdefault("tz_aware", True)
            self.client = MongoClient(**kwargs)
            db = self.client[database]
        elif driver_log_level is not None:
            raise ValueError("driver_log_level requires the storage to "
                             "create the MongoClient")

        names = dict(DEFAULT_COLLECTIONS)
        names.update(collections or {})

        self.clients = ClientStore(collection=db[names["clients"]])
        self.authorizations = AuthorizeStore(
            collection=db[names["authorize"]], client_store=self.clients)
        self.access = AccessStore(collection=db[names["access"]],
                                  client_store=self.clients)

    @classmethod
    def from_settings(cls, settings=None):
        """
        Creates a storage from :class:`oauth2storage.config.Settings`, read
        from the environment if none are given.
        """
        if settings is None:
            settings = Settings()

        return cls(host=settings.mongodb_uri, database=settings.database,
                   collections={"clients": settings.clients_collection,
                                "authorize": settings.authorize_collection,
                                "access": settings.access_collection},
                   driver_log_level=settings.driver_log_level)

    def close(self):
        if self.client is not None:
            self.client.close()

    def create_client(self, client):
        self.clients.create_client(client)

    def get_client(self, client_id):
        return self.clients.get_client(client_id)

    def update_client(self, client):
        self.clients.update_client(client)

    def delete_client(self, client):
        self.clients.delete_client(client)

    def save_authorize(self, authorize_data):
        self.authorizations.save_authorize(authorize_data)

    def load_authorize(self, code):
        return self.authorizations.load_authorize(code)

    def remove_authorize(self, code):
        self.authorizations.remove_authorize(code)

    def save_access(self, access_data):
        self.access.save_access(access_data)

    def load_by_access_token(self, access_token):
        return self.access.load_by_access_token(access_token)

    def load_by_refresh_token(self, refresh_token):
        return self.access.load_by_refresh_token(refresh_token)

    def remove_by_access_token(self, access_token):
        self.access.remove_by_access_token(access_token)

    def remove_by_refresh_token(self, refresh_token):
        self.access.remove_by_refresh_token(refresh_token)
