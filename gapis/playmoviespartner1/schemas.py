"""Play Movies Partner v1 resources."""
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from ..schema import Schema


@dataclass
class Order(Schema):
    """Tracks the fulfillment of an Edit delivered with the legacy, non-component delivery.

    Identified by the Google generated ``order_id``; partners may also refer
    to it by its ``custom_id``.
    """
    countries: Optional[List[str]] = None
    status_detail: Optional[str] = None
    status: Optional[str] = None
    earliest_avail_start_time: Optional[str] = None
    name: Optional[str] = None
    studio_name: Optional[str] = None
    received_time: Optional[str] = None
    season_name: Optional[str] = None
    custom_id: Optional[str] = None
    channel_name: Optional[str] = None
    approved_time: Optional[str] = None
    show_name: Optional[str] = None
    normalized_priority: Optional[str] = None
    order_id: Optional[str] = None
    type_: Optional[str] = None
    rejection_note: Optional[str] = None
    channel_id: Optional[str] = None
    legacy_priority: Optional[str] = None
    pph_name: Optional[str] = None
    ordered_time: Optional[str] = None
    priority: Optional[float] = None
    video_id: Optional[str] = None
    episode_name: Optional[str] = None


@dataclass
class ListOrdersResponse(Schema):
    orders: Optional[List[Order]] = None
    next_page_token: Optional[str] = None
    total_size: Optional[int] = None


@dataclass
class StoreInfo(Schema):
    """A playable sequence (video) of an Edit available at the Google Play Store.

    Identified by ``video_id`` and ``country``.
    """
    live_time: Optional[str] = None
    video_id: Optional[str] = None
    has_info_cards: Optional[bool] = None
    has_vod_offer: Optional[bool] = None
    pph_names: Optional[List[str]] = None
    episode_number: Optional[str] = None
    studio_name: Optional[str] = None
    subtitles: Optional[List[str]] = None
    audio_tracks: Optional[List[str]] = None
    show_name: Optional[str] = None
    country: Optional[str] = None
    show_id: Optional[str] = None
    type_: Optional[str] = None
    trailer_id: Optional[str] = None
    has_hd_offer: Optional[bool] = None
    mid: Optional[str] = None
    has_audio51: Optional[bool] = None
    name: Optional[str] = None
    season_id: Optional[str] = None
    title_level_eidr: Optional[str] = None
    season_name: Optional[str] = None
    season_number: Optional[str] = None
    has_est_offer: Optional[bool] = None
    edit_level_eidr: Optional[str] = None
    has_sd_offer: Optional[bool] = None


@dataclass
class ListStoreInfosResponse(Schema):
    next_page_token: Optional[str] = None
    total_size: Optional[int] = None
    store_infos: Optional[List[StoreInfo]] = None


@dataclass
class Avail(Schema):
    """Availability window of an Edit in a country, in EMA Avails 1.6b format."""
    series_title_internal_alias: Optional[str] = None
    format_profile: Optional[str] = None
    content_id: Optional[str] = None
    title_internal_alias: Optional[str] = None
    rating_value: Optional[str] = None
    store_language: Optional[str] = None
    caption_exemption: Optional[str] = None
    display_name: Optional[str] = None
    product_id: Optional[str] = None
    season_title_internal_alias: Optional[str] = None
    episode_alt_id: Optional[str] = None
    price_value: Optional[str] = None
    territory: Optional[str] = None
    work_type: Optional[str] = None
    avail_id: Optional[str] = None
    rating_reason: Optional[str] = None
    episode_title_internal_alias: Optional[str] = None
    suppression_lift_date: Optional[str] = None
    season_alt_id: Optional[str] = None
    encode_id: Optional[str] = None
    price_type: Optional[str] = None
    caption_included: Optional[bool] = None
    license_type: Optional[str] = None
    season_number: Optional[str] = None
    release_date: Optional[str] = None
    end: Optional[str] = None
    video_id: Optional[str] = None
    start: Optional[str] = None
    rating_system: Optional[str] = None
    pph_names: Optional[List[str]] = None
    series_alt_id: Optional[str] = None
    alt_id: Optional[str] = None
    episode_number: Optional[str] = None


@dataclass
class ListAvailsResponse(Schema):
    avails: Optional[List[Avail]] = None
    next_page_token: Optional[str] = None
    total_size: Optional[int] = None
