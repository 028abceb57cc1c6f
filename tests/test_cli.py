# tests/test_cli.py
from __future__ import annotations

import io
import json
import os
import tempfile
import unittest
from unittest.mock import patch

import httpx

from gapis.auth import ACCESS_TOKEN_ENV, StaticTokenAuthenticator
from gapis.cli import (FieldCursor, apply_params, arg_from_str, build_parser, did_you_mean, kebab_case,
                       parse_kv_arg, request_from_kv_args, resolve_authenticator, run)
from gapis.containeranalysis1.cli import API as CONTAINER_API
from gapis.containeranalysis1.schemas import Note, Occurrence, SetIamPolicyRequest
from gapis.errors import (FieldError, InvalidKeyValueSyntax, InvalidOptionsError, ParseError, TokenError,
                          UnknownParameter)
from gapis.playmoviespartner1 import PlayMovies
from gapis.playmoviespartner1.cli import API as MOVIES_API


class TestFieldCursor(unittest.TestCase):
    def cursor(self, *keys) -> FieldCursor:
        c = FieldCursor()
        for k in keys:
            c.set(k)
        return c

    def test_relative_and_absolute(self):
        self.assertEqual(self.cursor("a.b", "c").path, ["a", "b", "c"])
        self.assertEqual(self.cursor("a.b", ".c").path, ["c"])

    def test_move_up(self):
        self.assertEqual(self.cursor("a.b.c", "..").path, ["a", "b"])
        self.assertEqual(self.cursor("a.b.c", "...").path, ["a"])
        self.assertEqual(self.cursor("a.b", "..d").path, ["a", "d"])

    def test_lone_dot_resets(self):
        self.assertEqual(self.cursor("a.b", ".").path, [])

    def test_move_up_on_empty(self):
        with self.assertRaises(FieldError) as ctx:
            self.cursor("..")
        self.assertIn("Cannot move up on empty field cursor", str(ctx.exception))

    def test_trailing_separator(self):
        with self.assertRaises(FieldError):
            self.cursor("a.")

    def test_failed_set_leaves_cursor_unchanged(self):
        c = self.cursor("a")
        with self.assertRaises(FieldError):
            c.set("b.")
        self.assertEqual(str(c), "a")


class TestHelpers(unittest.TestCase):
    def test_kebab_case(self):
        self.assertEqual(kebab_case("cvssV3"), "cvss-v3")
        self.assertEqual(kebab_case("humanReadableName"), "human-readable-name")
        self.assertEqual(kebab_case("_type"), "-type")

    def test_parse_kv_arg(self):
        self.assertEqual(parse_kv_arg("a=b=c"), ("a", "b=c"))
        with self.assertRaises(InvalidKeyValueSyntax):
            parse_kv_arg("novalue")
        with self.assertRaises(InvalidKeyValueSyntax) as ctx:
            parse_kv_arg("k=", is_hashmap=True)
        self.assertIn("hashmap", str(ctx.exception))

    def test_arg_from_str(self):
        self.assertEqual(arg_from_str("12", "n", int), 12)
        self.assertEqual(arg_from_str("1.5", "n", float), 1.5)
        self.assertIs(arg_from_str("false", "b", bool), False)
        self.assertEqual(arg_from_str("x", "s", str), "x")
        with self.assertRaises(ParseError):
            arg_from_str("yes", "b", bool)
        with self.assertRaises(ParseError):
            arg_from_str("1.5", "n", int)

    def test_did_you_mean(self):
        self.assertEqual(did_you_mean("pagesize", ["page-size", "page-token"]), "page-size")
        self.assertIsNone(did_you_mean("zzz", ["page-size"]))


class TestRequestFields(unittest.TestCase):
    def test_builds_nested_request(self):
        issues = []
        note = request_from_kv_args(Note, [
            "kind=VULNERABILITY",
            "vulnerability",
            "cvss-score=7.5",
            "cvss-v3.base-score=9.8",
            "..",
            "related-note-names=a",
            "related-note-names=b",
            ".upgrade.version.inclusive=true",
            ".upgrade.version.epoch=2",
        ], issues)
        self.assertEqual(issues, [])
        self.assertEqual(note.to_dict(), {
            "kind": "VULNERABILITY",
            "vulnerability": {"cvssScore": 7.5, "cvssV3": {"baseScore": 9.8}},
            "relatedNoteNames": ["a", "b"],
            "upgrade": {"version": {"inclusive": True, "epoch": 2}},
        })

    def test_map_fields(self):
        issues = []
        occ = request_from_kv_args(Occurrence, ["build.provenance.build-options=k1=v1",
                                               "build.provenance.build-options=k2=v2"], issues)
        self.assertEqual(issues, [])
        self.assertEqual(occ.build.provenance.build_options, {"k1": "v1", "k2": "v2"})

    def test_issues_are_collected(self):
        issues = []
        request_from_kv_args(Note, [
            "vulnerability.cvss-scor=1",
            "upgrade.version.epoch=abc",
            "vulnerability=x",
            "kind=",
            "a.",
        ], issues)
        self.assertEqual(len(issues), 5)
        self.assertIn("Did you mean 'cvss-score'?", str(issues[0]))
        self.assertIsInstance(issues[1], ParseError)
        self.assertIsInstance(issues[2], FieldError)
        self.assertIsInstance(issues[3], InvalidKeyValueSyntax)
        self.assertIsInstance(issues[4], FieldError)


class TestParams(unittest.TestCase):
    def test_method_and_global_params(self):
        hub = PlayMovies(StaticTokenAuthenticator("t"))
        self.addCleanup(hub.close)
        call = hub.accounts().orders_list("acc")
        issues = []
        apply_params(call, ["video-ids=v1", "video-ids=v2", "page-size=10", "quota-user=me",
                            "$-xgafv=2", "fields=orders(orderId)", "pagesize=3", "page-size=ten"], issues)
        self.assertEqual(call._values["videoIds"], ["v1", "v2"])
        self.assertEqual(call._values["pageSize"], 10)
        self.assertEqual(call._additional_params,
                         {"quotaUser": "me", "$.xgafv": "2", "fields": "orders(orderId)"})
        self.assertEqual(len(issues), 2)
        self.assertIsInstance(issues[0], UnknownParameter)
        self.assertEqual(issues[0].suggestion, "page-size")
        self.assertIsInstance(issues[1], ParseError)

    def test_invalid_options_error_lists_every_issue(self):
        err = InvalidOptionsError([UnknownParameter("x"), InvalidKeyValueSyntax("y")])
        self.assertEqual(str(err).splitlines(), ["Parameter 'x' is unknown.",
                                                 "'y' does not match pattern <key>=<value>."])
        self.assertEqual(err.exit_code, 1)


class TestAuthResolution(unittest.TestCase):
    def setUp(self):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.root = tmp.name

    def test_env_token_before_adc(self):
        with patch.dict(os.environ, {ACCESS_TOKEN_ENV: "env-tok"}), \
                patch("gapis.cli.default_authenticator") as adc:
            auth = resolve_authenticator(self.root, "api", {})
        self.assertEqual(auth.token([]), "env-tok")
        adc.assert_not_called()

    def test_token_file_first(self):
        with open(os.path.join(self.root, "api-token.json"), "w", encoding="utf-8") as fp:
            json.dump({"refresh_token": "r", "client_id": "c", "client_secret": "s"}, fp)
        with patch.dict(os.environ, {ACCESS_TOKEN_ENV: "env-tok"}):
            auth = resolve_authenticator(self.root, "api", {})
        self.assertEqual(auth.persist_to, os.path.join(self.root, "api-token.json"))

    def test_no_credentials_at_all(self):
        with patch.dict(os.environ, {}, clear=True), \
                patch("gapis.cli.default_authenticator", side_effect=TokenError("none")), \
                self.assertLogs("gapis.cli", "WARNING"):
            self.assertIsNone(resolve_authenticator(self.root, "api", {}))


class TestParser(unittest.TestCase):
    def test_request_types_come_from_call_builders(self):
        call_class = CONTAINER_API.call_class
        self.assertIs(call_class("projects", CONTAINER_API.method("projects", "notes-create"))._request, Note)
        self.assertIs(call_class("projects", CONTAINER_API.method("projects", "occurrences-set-iam-policy"))._request,
                      SetIamPolicyRequest)
        self.assertIsNone(call_class("projects", CONTAINER_API.method("projects", "notes-get"))._request)
        for m in MOVIES_API.resources["accounts"]:
            self.assertIsNone(MOVIES_API.call_class("accounts", m)._request)

    def test_request_flag_required_only_with_a_body(self):
        parser = build_parser(CONTAINER_API)
        with patch("sys.stderr", io.StringIO()), self.assertRaises(SystemExit):
            parser.parse_args(["projects", "notes-create", "projects/p"])
        ns = parser.parse_args(["projects", "notes-get", "projects/p/notes/n"])
        self.assertFalse(hasattr(ns, "kv"))


class TestRun(unittest.TestCase):
    def setUp(self):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.root = tmp.name
        env = patch.dict(os.environ, {ACCESS_TOKEN_ENV: "env-tok"})
        env.start()
        self.addCleanup(env.stop)
        for key in ("PLAYMOVIESPARTNER1_BASE_URL", "CONTAINERANALYSIS1_BASE_URL"):
            os.environ.pop(key, None)
        self.requests = []
        self.reply = (200, {})

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.reply
        return httpx.Response(status, json=body)

    def run_cli(self, api, *argv):
        stdout, stderr = io.StringIO(), io.StringIO()
        with patch("sys.stdout", stdout), patch("sys.stderr", stderr):
            code = run(api, ["--config-dir", self.root, *argv], transport=httpx.MockTransport(self.handler))
        return code, stdout.getvalue(), stderr.getvalue()

    def test_get_prints_json_without_nulls(self):
        self.reply = (200, {"orderId": "o1", "name": "Film", "rejectionNote": None})
        code, out, err = self.run_cli(MOVIES_API, "accounts", "orders-get", "acc", "o1")
        self.assertEqual(code, 0, err)
        self.assertEqual(json.loads(out), {"orderId": "o1", "name": "Film"})
        req = self.requests[0]
        self.assertEqual(req.url.path, "/v1/accounts/acc/orders/o1")
        self.assertEqual(req.headers["Authorization"], "Bearer env-tok")
        self.assertTrue(os.path.exists(os.path.join(self.root, "playmoviespartner1-secret.json")))

    def test_request_fields_and_params(self):
        code, _, err = self.run_cli(CONTAINER_API, "projects", "notes-create", "projects/p",
                                    "-r", "kind=VULNERABILITY", "-r", "vulnerability.cvss-score=7.5",
                                    "-p", "note-id=CVE-1")
        self.assertEqual(code, 0, err)
        req = self.requests[0]
        self.assertEqual(req.url.path, "/v1/projects/p/notes")
        self.assertEqual(req.url.params["noteId"], "CVE-1")
        self.assertEqual(json.loads(req.content), {"kind": "VULNERABILITY", "vulnerability": {"cvssScore": 7.5}})

    def test_output_file(self):
        self.reply = (200, {"notes": [{"name": "n"}]})
        out_path = os.path.join(self.root, "out.json")
        code, out, _ = self.run_cli(CONTAINER_API, "projects", "notes-list", "projects/p",
                                    "-p", "page-size=1", "-o", out_path)
        self.assertEqual((code, out), (0, ""))
        with open(out_path, encoding="utf-8") as fp:
            self.assertEqual(json.load(fp), {"notes": [{"name": "n"}]})

    def test_unwritable_output(self):
        code, _, err = self.run_cli(MOVIES_API, "accounts", "orders-get", "acc", "o1",
                                    "-o", os.path.join(self.root, "missing", "out.json"))
        self.assertEqual(code, 1)
        self.assertIn("Failed to open output file", err)
        self.assertEqual(self.requests, [])

    def test_invalid_options_exit_before_calling(self):
        code, _, err = self.run_cli(MOVIES_API, "accounts", "orders-list", "acc",
                                    "-p", "bogus=1", "-p", "page-size=x")
        self.assertEqual(code, 1)
        self.assertIn("Parameter 'bogus' is unknown.", err)
        self.assertIn("Failed to parse argument 'page-size'", err)
        self.assertEqual(self.requests, [])

    def test_api_error(self):
        self.reply = (404, {"error": {"code": 404, "message": "No such order"}})
        code, _, err = self.run_cli(MOVIES_API, "accounts", "orders-get", "acc", "o1")
        self.assertEqual(code, 1)
        self.assertIn("No such order", err)

    def test_api_error_debug(self):
        self.reply = (404, {"error": {"code": 404, "message": "No such order"}})
        code, _, err = self.run_cli(MOVIES_API, "--debug", "accounts", "orders-get", "acc", "o1")
        self.assertEqual(code, 1)
        self.assertIn("BadRequest(", err)

    def test_config_dir_failure(self):
        blocker = os.path.join(self.root, "file")
        open(blocker, "w").close()
        stderr = io.StringIO()
        with patch("sys.stderr", stderr):
            code = run(MOVIES_API, ["--config-dir", os.path.join(blocker, "cfg"), "accounts", "orders-get", "a", "o"])
        self.assertEqual(code, 3)

    def test_secret_failure(self):
        with open(os.path.join(self.root, "playmoviespartner1-secret.json"), "w", encoding="utf-8") as fp:
            fp.write("[]")
        code, _, err = self.run_cli(MOVIES_API, "accounts", "orders-get", "a", "o")
        self.assertEqual(code, 4)
        self.assertIn("not formatted correctly", err)


if __name__ == "__main__":
    unittest.main()
