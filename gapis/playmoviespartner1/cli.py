"""``playmoviespartner1`` console script."""
import sys

from ..cli import Api, Method, run
from .api import PlayMovies

_ACCOUNT = ("account-id", "REQUIRED. See _General Notes_ for more information.")

API = Api(
    name="playmoviespartner1",
    hub=PlayMovies,
    description="Gets the delivery status of titles for Google Play Movies Partners.",
    resources={
        "accounts": [
            Method("avails-get", "avails_get", (_ACCOUNT, ("avail-id", "REQUIRED. Avail ID.")),
                   about="Get an Avail given its avail group id and avail id."),
            Method("avails-list", "avails_list", (_ACCOUNT,),
                   about="List Avails owned or managed by the partner."),
            Method("orders-get", "orders_get", (_ACCOUNT, ("order-id", "REQUIRED. Order ID.")),
                   about="Get an Order given its id."),
            Method("orders-list", "orders_list", (_ACCOUNT,),
                   about="List Orders owned or managed by the partner."),
            Method("store-infos-country-get", "store_infos_country_get",
                   (_ACCOUNT, ("video-id", "REQUIRED. Video ID."),
                    ("country", "REQUIRED. Edit country.")),
                   about="Get a StoreInfo given its video id and country."),
            Method("store-infos-list", "store_infos_list", (_ACCOUNT,),
                   about="List StoreInfos owned or managed by the partner."),
        ],
    },
)


def main() -> None:
    sys.exit(run(API))
