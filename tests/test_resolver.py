"""Tests for request resolution."""

import pytest
from rpc_core.errors import InvalidParams, InvalidRequest, MethodNotFound
from rpc_core.registry import Registry
from rpc_core.resolver import request_id, resolve


@pytest.fixture
def handler():
    registry = Registry()
    registry.register("add", lambda a, b: a + b)
    return registry


@pytest.mark.parametrize("payload", [None, {}, [], "add", 42, [{"jsonrpc": "2.0"}]])
def test_non_object_payload(handler, payload):
    with pytest.raises(InvalidRequest):
        resolve(payload, handler)


@pytest.mark.parametrize("version", [None, "1.0", "2", 2.0, "2.0 "])
def test_bad_jsonrpc_version(handler, version):
    with pytest.raises(InvalidRequest):
        resolve({"jsonrpc": version, "method": "add"}, handler)


def test_missing_jsonrpc(handler):
    with pytest.raises(InvalidRequest):
        resolve({"method": "add", "id": 1}, handler)


def test_extra_key_rejects_request(handler):
    with pytest.raises(InvalidRequest):
        resolve({"jsonrpc": "2.0", "method": "add", "extra": True}, handler)


@pytest.mark.parametrize("method", [None, "", 5, ["add"]])
def test_bad_method(handler, method):
    with pytest.raises(InvalidRequest):
        resolve({"jsonrpc": "2.0", "method": method}, handler)


@pytest.mark.parametrize("req_id", [True, {"a": 1}, [1]])
def test_bad_id(handler, req_id):
    with pytest.raises(InvalidRequest):
        resolve({"jsonrpc": "2.0", "method": "add", "id": req_id}, handler)


@pytest.mark.parametrize("method", ["missing", "_private", "rpc.discover"])
def test_method_not_found(handler, method):
    with pytest.raises(MethodNotFound) as exc_info:
        resolve({"jsonrpc": "2.0", "method": method}, handler)
    assert exc_info.value.method == method


def test_shape_checked_before_method(handler):
    # unknown method *and* bad version → shape error wins
    with pytest.raises(InvalidRequest):
        resolve({"jsonrpc": "1.0", "method": "missing"}, handler)


@pytest.mark.parametrize("params", [None, {}, []])
def test_empty_params_default(handler, params):
    req = resolve({"jsonrpc": "2.0", "method": "add", "params": params}, handler)
    assert req.params == {}


def test_positional_params_rejected(handler):
    with pytest.raises(InvalidParams):
        resolve({"jsonrpc": "2.0", "method": "add", "params": [1, 2]}, handler)


def test_valid_request(handler):
    req = resolve(
        {"jsonrpc": "2.0", "id": 7, "method": "add", "params": {"a": 1, "b": 2}}, handler
    )
    assert req.method == "add"
    assert req.params == {"a": 1, "b": 2}
    assert (req.id, req.has_id) == (7, True)


def test_absent_id_is_not_present(handler):
    req = resolve({"jsonrpc": "2.0", "method": "add"}, handler)
    assert req.has_id is False


@pytest.mark.parametrize("req_id", [None, 0, "", "abc", 1.5])
def test_falsy_id_is_still_present(handler, req_id):
    req = resolve({"jsonrpc": "2.0", "method": "add", "id": req_id}, handler)
    assert (req.id, req.has_id) == (req_id, True)


def test_request_id_best_effort():
    assert request_id({"id": 3}) == (3, True)
    assert request_id({"id": None}) == (None, True)
    assert request_id({"id": {"x": 1}}) == (None, False)
    assert request_id({}) == (None, False)
    assert request_id("nope") == (None, False)
