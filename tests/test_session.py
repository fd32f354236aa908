"""Tests for share links and input parsing"""
# pylint: skip-file

import base64
import json
import unittest

from dsviz.session import (
    MAX_VERTICES,
    SessionPayload,
    build_share_url,
    decode_session,
    encode_session,
    parse_int,
    parse_int_values,
    session_from_url,
    validate_num_vertices,
)


def _token(data) -> str:
    return base64.b64encode(json.dumps(data).encode("utf-8")).decode("ascii")


class TestSessionPayload(unittest.TestCase):

    def setUp(self):
        self.payload = SessionPayload(random_values=[5, 3, 8], selected_algorithm="avl", num_vertices=3)

    def test_to_dict_keys(self):
        self.assertEqual(self.payload.to_dict(), {
            "randomValues": [5, 3, 8],
            "selectedAlgorithm": "avl",
            "numVertices": 3,
        })

    def test_encoded_payload_is_compact_json(self):
        raw = base64.b64decode(encode_session(self.payload)).decode("utf-8")
        self.assertEqual(raw, '{"randomValues":[5,3,8],"selectedAlgorithm":"avl","numVertices":3}')

    def test_decode_encoded(self):
        self.assertEqual(decode_session(encode_session(self.payload)), self.payload)

    def test_share_url(self):
        url = build_share_url("https://example.org/trees", self.payload)
        self.assertTrue(url.startswith("https://example.org/trees?data="))
        self.assertEqual(session_from_url(url), self.payload)

    def test_url_with_unencoded_token(self):
        token = encode_session(self.payload)
        self.assertEqual(session_from_url(f"https://example.org/?data={token}"), self.payload)

    def test_plus_read_back_as_space_is_restored(self):
        token = base64.b64encode(b"\xfb\xef\xbe").decode("ascii")
        self.assertEqual(token, "++++")
        with self.assertLogs("dsviz.Session", level="WARNING") as cm:
            self.assertIsNone(session_from_url(f"https://example.org/?data={token}"))
        # Restored "+" decodes as Base64 and only fails as UTF-8
        self.assertIn("utf-8", cm.output[0])

    def test_url_without_data(self):
        self.assertIsNone(session_from_url("https://example.org/?other=1"))
        self.assertIsNone(session_from_url("https://example.org/"))


class TestInvalidTokens(unittest.TestCase):

    def assertInvalid(self, token):
        with self.assertLogs("dsviz.Session", level="WARNING"):
            self.assertIsNone(decode_session(token))

    def test_not_base64(self):
        self.assertInvalid("%%%not-base64%%%")

    def test_not_json(self):
        self.assertInvalid(base64.b64encode(b"{nope").decode("ascii"))

    def test_not_an_object(self):
        self.assertInvalid(_token([1, 2, 3]))

    def test_bad_values(self):
        base = {"selectedAlgorithm": "bst", "numVertices": 3}
        self.assertInvalid(_token(dict(base, randomValues="1,2")))
        self.assertInvalid(_token(dict(base, randomValues=[1, "2"])))
        self.assertInvalid(_token(dict(base, randomValues=[1, True])))
        self.assertInvalid(_token(dict(base, randomValues=[1.5])))

    def test_unknown_algorithm(self):
        self.assertInvalid(_token({"randomValues": [1], "selectedAlgorithm": "splay", "numVertices": 1}))

    def test_bad_vertex_count(self):
        base = {"randomValues": [1], "selectedAlgorithm": "bst"}
        self.assertInvalid(_token(dict(base, numVertices=MAX_VERTICES + 1)))
        self.assertInvalid(_token(dict(base, numVertices=-1)))
        self.assertInvalid(_token(dict(base, numVertices="7")))
        self.assertInvalid(_token(base))


class TestInputParsing(unittest.TestCase):

    def test_validate_num_vertices(self):
        self.assertTrue(validate_num_vertices(0))
        self.assertTrue(validate_num_vertices(MAX_VERTICES))
        self.assertFalse(validate_num_vertices(MAX_VERTICES + 1))
        self.assertFalse(validate_num_vertices(-1))

    def test_parse_int(self):
        self.assertEqual(parse_int(" 12 "), 12)
        self.assertEqual(parse_int("-4"), -4)
        self.assertIsNone(parse_int(""))
        self.assertIsNone(parse_int("   "))
        self.assertIsNone(parse_int("1.5"))
        self.assertIsNone(parse_int("abc"))

    def test_parse_int_values(self):
        self.assertEqual(parse_int_values("5, 3,8"), ([5, 3, 8], []))
        self.assertEqual(parse_int_values(""), ([], []))

    def test_parse_int_values_rejects(self):
        with self.assertLogs("dsviz.Session", level="INFO"):
            values, rejected = parse_int_values("1, x, , 2, 3.5")
        self.assertEqual(values, [1, 2])
        self.assertEqual(rejected, ["x", "3.5"])


if __name__ == "__main__":
    unittest.main()
