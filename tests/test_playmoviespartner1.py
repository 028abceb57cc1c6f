# tests/test_playmoviespartner1.py
from __future__ import annotations

import os
import unittest

import httpx

from gapis.auth import StaticTokenAuthenticator
from gapis.playmoviespartner1 import PlayMovies, Scope
from gapis.playmoviespartner1.api import AccountStoreInfoListCall

HOST = "playmoviespartner.googleapis.com"


class TestPlayMovies(unittest.TestCase):
    def setUp(self):
        os.environ.pop("PLAYMOVIESPARTNER1_BASE_URL", None)
        self.requests = []
        self.reply = {}

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return httpx.Response(200, json=self.reply)

        self.hub = PlayMovies(StaticTokenAuthenticator("tok"), transport=httpx.MockTransport(handler))
        self.addCleanup(self.hub.close)

    def test_orders_list(self):
        self.reply = {"orders": [{"orderId": "o1", "status": "STATUS_PROCESSING"}], "totalSize": 1}
        _, resp = (self.hub.accounts().orders_list("acc1")
                   .add_video_ids("v1").add_video_ids("v2")
                   .add_status("STATUS_APPROVED")
                   .page_size(20)
                   .custom_id("cid")
                   .execute())
        req = self.requests[0]
        self.assertEqual(req.url.host, HOST)
        self.assertEqual(req.url.path, "/v1/accounts/acc1/orders")
        self.assertEqual(list(req.url.params.multi_items()), [
            ("videoIds", "v1"), ("videoIds", "v2"), ("status", "STATUS_APPROVED"),
            ("pageSize", "20"), ("customId", "cid"), ("alt", "json"),
        ])
        self.assertEqual(resp.orders[0].order_id, "o1")
        self.assertEqual(resp.total_size, 1)

    def test_orders_get(self):
        self.reply = {"orderId": "o1", "type": "EPISODE", "priority": 3.5}
        _, order = self.hub.accounts().orders_get("acc1", "o1").execute()
        self.assertEqual(self.requests[0].url.path, "/v1/accounts/acc1/orders/o1")
        self.assertEqual(order.type_, "EPISODE")
        self.assertEqual(order.priority, 3.5)

    def test_avails(self):
        self.reply = {"availId": "a1", "territory": "US", "captionIncluded": True}
        _, avail = self.hub.accounts().avails_get("acc1", "a1").execute()
        self.assertEqual(self.requests[0].url.path, "/v1/accounts/acc1/avails/a1")
        self.assertTrue(avail.caption_included)

        self.hub.accounts().avails_list("acc1").title("Film").add_territories("US").alt_id("x").execute()
        params = self.requests[1].url.params
        self.assertEqual(self.requests[1].url.path, "/v1/accounts/acc1/avails")
        self.assertEqual((params["title"], params["territories"], params["altId"]), ("Film", "US", "x"))

    def test_store_infos(self):
        self.reply = {"videoId": "v1", "country": "DE", "hasHdOffer": True, "audioTracks": ["en", "de"]}
        _, info = self.hub.accounts().store_infos_country_get("acc1", "v1", "DE").execute()
        self.assertEqual(self.requests[0].url.path, "/v1/accounts/acc1/storeInfos/v1/country/DE")
        self.assertEqual(info.audio_tracks, ["en", "de"])

        call = self.hub.accounts().store_infos_list("acc1").add_countries("DE").add_mids("m1").add_season_ids("s1")
        self.assertIsInstance(call, AccountStoreInfoListCall)
        call.execute()
        self.assertEqual(self.requests[1].url.params.get_list("countries"), ["DE"])
        self.assertEqual(self.requests[1].url.params["seasonIds"], "s1")

    def test_readonly_scope_and_token(self):
        self.hub.accounts().orders_get("acc1", "o1").execute()
        self.assertEqual(self.requests[0].headers["Authorization"], "Bearer tok")
        self.assertEqual(Scope.DEFAULT, "https://www.googleapis.com/auth/playmovies_partner.readonly")

    def test_iterate_all_store_infos(self):
        pages = iter([
            {"storeInfos": [{"videoId": "a"}], "nextPageToken": "n"},
            {"storeInfos": [{"videoId": "b"}]},
        ])

        def handler(request):
            self.requests.append(request)
            return httpx.Response(200, json=next(pages))

        with PlayMovies(StaticTokenAuthenticator("tok"), transport=httpx.MockTransport(handler)) as hub:
            ids = [s.video_id for s in hub.accounts().store_infos_list("acc1").iter_items()]
        self.assertEqual(ids, ["a", "b"])
        self.assertEqual(self.requests[-1].url.params["pageToken"], "n")


if __name__ == "__main__":
    unittest.main()
