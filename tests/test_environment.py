"""Tests for runtime environment detection."""

import sys
import types

import pytest

from timberpy import Environment, detect_environment


def test_regular_interpreter_is_server():
    """Test that CPython on a normal OS is a server runtime."""
    if sys.platform == "emscripten":
        pytest.skip("running inside a WebAssembly runtime")
    assert detect_environment() is Environment.SERVER


def test_browser_window_is_browser(monkeypatch: pytest.MonkeyPatch):
    """Test that a js bridge exposing window means browser."""
    js = types.ModuleType("js")
    js.window = object()
    monkeypatch.setattr(sys, "platform", "emscripten")
    monkeypatch.setitem(sys.modules, "js", js)

    assert detect_environment() is Environment.BROWSER


def test_web_worker_is_server(monkeypatch: pytest.MonkeyPatch):
    """Test that a js bridge without window is not a browser page."""
    monkeypatch.setattr(sys, "platform", "emscripten")
    monkeypatch.setitem(sys.modules, "js", types.ModuleType("js"))

    assert detect_environment() is Environment.SERVER


def test_missing_js_bridge_is_server(monkeypatch: pytest.MonkeyPatch):
    """Test that emscripten without a js module defaults to server."""
    monkeypatch.setattr(sys, "platform", "emscripten")
    monkeypatch.setitem(sys.modules, "js", None)

    assert detect_environment() is Environment.SERVER
