"""Tests for the Azul Zulu bundle resolver."""

import io
from unittest.mock import MagicMock, patch
from urllib.parse import parse_qsl, urlsplit

import pytest

from actions.inputs import Inputs
from actions.zulu import Bundle, bundle_params, bundle_url, resolve
from errors import FetchError, InputError, PayloadError, ResolutionError


def make_response(status_code=200, payload=None, json_error=None):
    """Helper to build a fake requests.Response."""
    res = MagicMock()
    res.status_code = status_code
    if json_error is not None:
        res.json.side_effect = json_error
    else:
        res.json.return_value = payload
    return res


class TestBundleUrl:
    """Query construction."""

    EXPECTED = [
        ("arch", "x86"),
        ("ext", "tar.gz"),
        ("features", "jdk"),
        ("hw_bitness", "64"),
        ("jdk_version", "11"),
        ("os", "linux"),
        ("javafx", "false"),
    ]

    def test_fixed_query_shape(self):
        assert bundle_params("jdk", "11") == self.EXPECTED

        url = bundle_url("jdk", "11")
        parts = urlsplit(url)
        assert f"{parts.scheme}://{parts.netloc}{parts.path}" == (
            "https://api.azul.com/zulu/download/community/v1.0/bundles/latest/"
        )
        assert parse_qsl(parts.query) == self.EXPECTED

    @patch("common.http_client.requests.get")
    def test_query_passed_as_params(self, mock_get):
        mock_get.return_value = make_response(payload={"jdk_version": [11, 0, 9], "url": "u"})

        resolve(Inputs({"type": "jdk", "version": "11"}))

        args, kwargs = mock_get.call_args
        assert args == ("https://api.azul.com/zulu/download/community/v1.0/bundles/latest/",)
        assert kwargs["params"] == self.EXPECTED
        assert kwargs["timeout"] == 30

    def test_unsafe_values_are_encoded(self):
        query = urlsplit(bundle_url("jdk fx", "11&os=mac")).query
        assert ("features", "jdk fx") in parse_qsl(query)
        assert ("jdk_version", "11&os=mac") in parse_qsl(query)
        assert parse_qsl(query).count(("os", "linux")) == 1


class TestResolve:
    """End-to-end resolution with the HTTP layer mocked."""

    @pytest.mark.parametrize("triple", [[11, 0, 9], [17, 0, 1], [1, 2, 3], [21, 0, 0]])
    @patch("common.http_client.requests.get")
    def test_version_is_dotted_triple(self, mock_get, triple):
        mock_get.return_value = make_response(payload={
            "jdk_version": triple,
            "url": "https://cdn.azul.com/zulu/bin/zulu.tar.gz",
        })

        outputs = resolve(Inputs({"type": "jdk", "version": str(triple[0])}))

        assert outputs["version"] == ".".join(str(p) for p in triple)
        assert outputs["uri"] == "https://cdn.azul.com/zulu/bin/zulu.tar.gz"
        assert "cpe" not in outputs

    @pytest.mark.parametrize("patch_level", [0, 1, 292, 345])
    @patch("common.http_client.requests.get")
    def test_java8_cpe(self, mock_get, patch_level):
        mock_get.return_value = make_response(payload={
            "jdk_version": [8, 0, patch_level],
            "url": "https://cdn.azul.com/zulu/bin/zulu8.tar.gz",
        })

        outputs = resolve(Inputs({"type": "jre", "version": "8"}))

        assert outputs["cpe"] == f"update{patch_level}"
        assert list(outputs) == ["version", "uri", "cpe"]

    @pytest.mark.parametrize("inputs", [{}, {"type": "jdk"}, {"version": "11"}, {"type": "", "version": "11"}])
    @patch("common.http_client.requests.get")
    def test_missing_inputs_abort_before_network(self, mock_get, inputs):
        with pytest.raises(InputError):
            resolve(Inputs(inputs))
        mock_get.assert_not_called()

    @patch("common.http_client.requests.get")
    def test_non_200_skips_decode(self, mock_get):
        res = make_response(status_code=404)
        mock_get.return_value = res

        with pytest.raises(FetchError) as exc_info:
            resolve(Inputs({"type": "jdk", "version": "11"}))

        assert exc_info.value.status_code == 404
        assert "404" in str(exc_info.value)
        res.json.assert_not_called()

    @patch("common.http_client.requests.get")
    def test_transport_error_wraps_url(self, mock_get):
        import requests
        mock_get.side_effect = requests.ConnectionError("boom")

        with pytest.raises(FetchError) as exc_info:
            resolve(Inputs({"type": "jdk", "version": "11"}))

        assert exc_info.value.url == bundle_url("jdk", "11")
        assert bundle_url("jdk", "11") in str(exc_info.value)

    @patch("common.http_client.requests.get")
    def test_malformed_json(self, mock_get):
        mock_get.return_value = make_response(json_error=ValueError("Expecting value"))

        with pytest.raises(PayloadError):
            resolve(Inputs({"type": "jdk", "version": "11"}))

    @patch("common.http_client.requests.get")
    def test_constraint_input_is_applied(self, mock_get):
        mock_get.return_value = make_response(payload={"jdk_version": [11, 0, 9], "url": "u"})

        with pytest.raises(ResolutionError):
            resolve(Inputs({"type": "jdk", "version": "11", "constraint": "^17"}))

    @patch("common.http_client.requests.get")
    def test_outputs_write_format(self, mock_get):
        mock_get.return_value = make_response(payload={"jdk_version": [11, 0, 9], "url": "https://x/y.tar.gz"})

        stream = io.StringIO()
        resolve(Inputs({"type": "jdk", "version": "11"})).write(stream)

        assert stream.getvalue() == "version=11.0.9\nuri=https://x/y.tar.gz\n"


class TestBundle:
    """Payload shape validation."""

    def test_from_json(self):
        bundle = Bundle.from_json({"jdk_version": [11, 0, 9, 1], "url": "u"})
        assert bundle.jdk_version == (11, 0, 9)
        assert bundle.version_key() == "11.0.9"

    @pytest.mark.parametrize("payload", [
        [],
        {"url": "u"},
        {"jdk_version": [11, 0], "url": "u"},
        {"jdk_version": ["11", "0", "9"], "url": "u"},
        {"jdk_version": [11, 0, 9]},
    ])
    def test_bad_shapes(self, payload):
        with pytest.raises(PayloadError):
            Bundle.from_json(payload)
