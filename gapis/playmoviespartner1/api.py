from __future__ import annotations

from ..client import CallBuilder, Hub, PagedCall, Param
from ..delegate import MethodInfo
from .schemas import (Avail, ListAvailsResponse, ListOrdersResponse, ListStoreInfosResponse,
                      Order, StoreInfo)


class Scope:
    """OAuth2 scopes of the API."""
    # View the digital assets you publish on Google Play Movies and TV
    PLAYMOVIES_PARTNER_READONLY = "https://www.googleapis.com/auth/playmovies_partner.readonly"
    DEFAULT = PLAYMOVIES_PARTNER_READONLY


class PlayMovies(Hub):
    """Central instance to access all Play Movies Partner resource activities.

        hub = PlayMovies(default_authenticator())
        _, avail = hub.accounts().avails_get("accountId", "availId").execute()
    """
    DEFAULT_BASE_URL = "https://playmoviespartner.googleapis.com/"
    DEFAULT_ROOT_URL = "https://playmoviespartner.googleapis.com/"
    ENV_PREFIX = "PLAYMOVIESPARTNER1"

    def accounts(self) -> "AccountMethods":
        return AccountMethods(self)


class AccountMethods:
    """Builders for all methods on *account* resources."""

    def __init__(self, hub: PlayMovies):
        self._hub = hub

    def orders_list(self, account_id: str) -> "AccountOrderListCall":
        """List Orders owned or managed by the partner."""
        return AccountOrderListCall(self._hub, accountId=account_id)

    def orders_get(self, account_id: str, order_id: str) -> "AccountOrderGetCall":
        """Get an Order given its id."""
        return AccountOrderGetCall(self._hub, accountId=account_id, orderId=order_id)

    def avails_list(self, account_id: str) -> "AccountAvailListCall":
        """List Avails owned or managed by the partner."""
        return AccountAvailListCall(self._hub, accountId=account_id)

    def avails_get(self, account_id: str, avail_id: str) -> "AccountAvailGetCall":
        """Get an Avail given its avail group id and avail id."""
        return AccountAvailGetCall(self._hub, accountId=account_id, availId=avail_id)

    def store_infos_country_get(self, account_id: str, video_id: str,
                                country: str) -> "AccountStoreInfoCountryGetCall":
        """Get a StoreInfo given its video id and country."""
        return AccountStoreInfoCountryGetCall(self._hub, accountId=account_id,
                                              videoId=video_id, country=country)

    def store_infos_list(self, account_id: str) -> "AccountStoreInfoListCall":
        """List StoreInfos owned or managed by the partner."""
        return AccountStoreInfoListCall(self._hub, accountId=account_id)


_ACCOUNT_ID = Param("accountId", location="path")


class _AccountCall(CallBuilder):
    _default_scope = Scope.DEFAULT

    def account_id(self, new_value: str):
        return self._set("accountId", new_value)


class _AccountPagedCall(PagedCall, _AccountCall):
    pass


class AccountOrderListCall(_AccountPagedCall):
    _info = MethodInfo("playmoviespartner.accounts.orders.list", "GET")
    _path = "v1/accounts/{accountId}/orders"
    _params = (
        _ACCOUNT_ID,
        Param("videoIds", repeated=True),
        Param("studioNames", repeated=True),
        Param("status", repeated=True),
        Param("pphNames", repeated=True),
        Param("pageToken"),
        Param("pageSize", int),
        Param("name"),
        Param("customId"),
    )
    _response = ListOrdersResponse
    _items = "orders"

    def add_video_ids(self, new_value: str):
        """Filter Orders that match any of the given video ids."""
        return self._add("videoIds", new_value)

    def add_studio_names(self, new_value: str):
        return self._add("studioNames", new_value)

    def add_status(self, new_value: str):
        """Filter Orders that match one of the given status."""
        return self._add("status", new_value)

    def add_pph_names(self, new_value: str):
        return self._add("pphNames", new_value)

    def name(self, new_value: str):
        """Filter that matches Orders with a name, show, season or episode
        that contains the given case-insensitive name."""
        return self._set("name", new_value)

    def custom_id(self, new_value: str):
        """Filter Orders that match a case-insensitive, partner-specific custom id."""
        return self._set("customId", new_value)


class AccountOrderGetCall(_AccountCall):
    _info = MethodInfo("playmoviespartner.accounts.orders.get", "GET")
    _path = "v1/accounts/{accountId}/orders/{orderId}"
    _params = (_ACCOUNT_ID, Param("orderId", location="path"))
    _response = Order

    def order_id(self, new_value: str):
        return self._set("orderId", new_value)


class AccountAvailListCall(_AccountPagedCall):
    _info = MethodInfo("playmoviespartner.accounts.avails.list", "GET")
    _path = "v1/accounts/{accountId}/avails"
    _params = (
        _ACCOUNT_ID,
        Param("videoIds", repeated=True),
        Param("title"),
        Param("territories", repeated=True),
        Param("studioNames", repeated=True),
        Param("pphNames", repeated=True),
        Param("pageToken"),
        Param("pageSize", int),
        Param("altIds", repeated=True),
        Param("altId"),
    )
    _response = ListAvailsResponse
    _items = "avails"

    def add_video_ids(self, new_value: str):
        return self._add("videoIds", new_value)

    def title(self, new_value: str):
        """Filter that matches Avails with a title_internal_alias,
        series_title_internal_alias, season_title_internal_alias,
        or episode_title_internal_alias that contains the given case-insensitive title."""
        return self._set("title", new_value)

    def add_territories(self, new_value: str):
        return self._add("territories", new_value)

    def add_studio_names(self, new_value: str):
        return self._add("studioNames", new_value)

    def add_pph_names(self, new_value: str):
        return self._add("pphNames", new_value)

    def add_alt_ids(self, new_value: str):
        return self._add("altIds", new_value)

    def alt_id(self, new_value: str):
        """Filter Avails that match a case-insensitive, partner-specific custom id.
        Deprecated in favour of alt_ids."""
        return self._set("altId", new_value)


class AccountAvailGetCall(_AccountCall):
    _info = MethodInfo("playmoviespartner.accounts.avails.get", "GET")
    _path = "v1/accounts/{accountId}/avails/{availId}"
    _params = (_ACCOUNT_ID, Param("availId", location="path"))
    _response = Avail

    def avail_id(self, new_value: str):
        return self._set("availId", new_value)


class AccountStoreInfoCountryGetCall(_AccountCall):
    _info = MethodInfo("playmoviespartner.accounts.storeInfos.country.get", "GET")
    _path = "v1/accounts/{accountId}/storeInfos/{videoId}/country/{country}"
    _params = (
        _ACCOUNT_ID,
        Param("videoId", location="path"),
        Param("country", location="path"),
    )
    _response = StoreInfo

    def video_id(self, new_value: str):
        return self._set("videoId", new_value)

    def country(self, new_value: str):
        return self._set("country", new_value)


class AccountStoreInfoListCall(_AccountPagedCall):
    _info = MethodInfo("playmoviespartner.accounts.storeInfos.list", "GET")
    _path = "v1/accounts/{accountId}/storeInfos"
    _params = (
        _ACCOUNT_ID,
        Param("videoIds", repeated=True),
        Param("videoId"),
        Param("studioNames", repeated=True),
        Param("seasonIds", repeated=True),
        Param("pphNames", repeated=True),
        Param("pageToken"),
        Param("pageSize", int),
        Param("name"),
        Param("mids", repeated=True),
        Param("countries", repeated=True),
    )
    _response = ListStoreInfosResponse
    _items = "store_infos"

    def add_video_ids(self, new_value: str):
        return self._add("videoIds", new_value)

    def video_id(self, new_value: str):
        """Filter StoreInfos that match a given video id. Deprecated in favour of video_ids."""
        return self._set("videoId", new_value)

    def add_studio_names(self, new_value: str):
        return self._add("studioNames", new_value)

    def add_season_ids(self, new_value: str):
        return self._add("seasonIds", new_value)

    def add_pph_names(self, new_value: str):
        return self._add("pphNames", new_value)

    def name(self, new_value: str):
        return self._set("name", new_value)

    def add_mids(self, new_value: str):
        return self._add("mids", new_value)

    def add_countries(self, new_value: str):
        return self._add("countries", new_value)
