"""
Conversion between records and the documents stored in a collection.

A record referencing a client is stored with a copy of that client embedded as
a sub-document. Decoding never trusts that copy: the decoders expect the
client to be resolved already and take it as an argument. Use
:func:`client_reference` to read the identifier needed to resolve it.
"""

from collections.abc import Mapping
from datetime import datetime
from numbers import Real

from oauth2storage.datatype import AccessData, AuthorizeData, Client
from oauth2storage.error import DecodeError

CLIENT_FIELD = "client"
AUTHORIZE_DATA_FIELD = "authorize_data"


def _field(document, name, types, optional=False):
    if name not in document or document[name] is None:
        if optional:
            return None
        raise DecodeError(name, "missing")

    value = document[name]

    if not isinstance(value, types):
        raise DecodeError(name, "unexpected type %s" % type(value).__name__)

    return value


def _sub_document(document, name, optional=False):
    return _field(document, name, Mapping, optional=optional)


def client_reference(document):
    """
    Returns the identifier of the client embedded in ``document``.

    :raises: :class:`oauth2storage.error.DecodeError` if the client
             sub-document or its identifier is missing or malformed.
    """
    return _field(_sub_document(document, CLIENT_FIELD), "identifier", str)


def optional_client_reference(document):
    """
    Like :func:`client_reference` but returns ``None`` if no client or no
    identifier has been embedded.
    """
    client = _sub_document(document, CLIENT_FIELD, optional=True)

    if client is None:
        return None

    return _field(client, "identifier", str, optional=True)


def embedded_authorize_data(document):
    """
    Returns the authorization record embedded in an access document or
    ``None`` if the access token was not issued for an authorization code.
    """
    return _sub_document(document, AUTHORIZE_DATA_FIELD, optional=True)


def client_to_document(client):
    return {"identifier": client.identifier,
            "secret": client.secret,
            "redirect_uri": client.redirect_uri,
            "user_data": client.user_data}


def client_from_document(document):
    return Client(identifier=_field(document, "identifier", str),
                  secret=_field(document, "secret", str, optional=True),
                  redirect_uri=_field(document, "redirect_uri", str),
                  user_data=document.get("user_data"))


def authorize_to_document(authorize_data):
    client = None
    if authorize_data.client is not None:
        client = client_to_document(authorize_data.client)

    return {CLIENT_FIELD: client,
            "code": authorize_data.code,
            "expires_in": authorize_data.expires_in,
            "scope": authorize_data.scope,
            "redirect_uri": authorize_data.redirect_uri,
            "state": authorize_data.state,
            "created_at": authorize_data.created_at,
            "user_data": authorize_data.user_data,
            "code_challenge": authorize_data.code_challenge,
            "code_challenge_method": authorize_data.code_challenge_method}


def authorize_from_document(document, client):
    """
    Creates an :class:`oauth2storage.datatype.AuthorizeData` from a stored
    document.

    :param document: The document as read from the collection.
    :param client: The resolved :class:`oauth2storage.datatype.Client` that
                   replaces the embedded copy.
    """
    return AuthorizeData(
        client=client,
        code=_field(document, "code", str),
        expires_in=_field(document, "expires_in", Real),
        redirect_uri=_field(document, "redirect_uri", str),
        created_at=_field(document, "created_at", datetime),
        scope=document.get("scope", ""),
        state=document.get("state", ""),
        user_data=document.get("user_data"),
        code_challenge=document.get("code_challenge", ""),
        code_challenge_method=document.get("code_challenge_method", ""))


def access_to_document(access_data):
    authorize_data = None
    if access_data.authorize_data is not None:
        authorize_data = authorize_to_document(access_data.authorize_data)

    return {CLIENT_FIELD: client_to_document(access_data.client),
            AUTHORIZE_DATA_FIELD: authorize_data,
            "access_token": access_data.access_token,
            "refresh_token": access_data.refresh_token,
            "expires_in": access_data.expires_in,
            "scope": access_data.scope,
            "redirect_uri": access_data.redirect_uri,
            "created_at": access_data.created_at,
            "user_data": access_data.user_data}


def access_from_document(document, client, authorize_data=None):
    """
    Creates an :class:`oauth2storage.datatype.AccessData` from a stored
    document.

    :param document: The document as read from the collection.
    :param client: The resolved client of the access token.
    :param authorize_data: The decoded authorization record the token was
                           issued for or ``None``.
    """
    return AccessData(
        client=client,
        authorize_data=authorize_data,
        access_token=_field(document, "access_token", str),
        refresh_token=_field(document, "refresh_token", str, optional=True),
        expires_in=_field(document, "expires_in", Real),
        created_at=_field(document, "created_at", datetime),
        scope=document.get("scope", ""),
        redirect_uri=document.get("redirect_uri", ""),
        user_data=document.get("user_data"))
