from __future__ import annotations

import importlib

import payqr.settings as settings
import pytest


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    for name in ("PAYQR_IMAGE_SIZE", "PAYQR_QUIET_ZONE", "PAYQR_LOG_PAYLOADS"):
        monkeypatch.delenv(name, raising=False)
    yield
    for name in ("PAYQR_IMAGE_SIZE", "PAYQR_QUIET_ZONE", "PAYQR_LOG_PAYLOADS"):
        monkeypatch.delenv(name, raising=False)
    importlib.reload(settings)


def test_defaults():
    reloaded = importlib.reload(settings)
    assert reloaded.IMAGE_SIZE == 512
    assert reloaded.QUIET_ZONE == 4
    assert reloaded.LOG_PAYLOADS is False


def test_image_size_override(monkeypatch):
    monkeypatch.setenv("PAYQR_IMAGE_SIZE", "280")
    reloaded = importlib.reload(settings)
    assert reloaded.IMAGE_SIZE == 280


@pytest.mark.parametrize("value", ["abc", "0", "-5"])
def test_image_size_invalid_falls_back(monkeypatch, value):
    monkeypatch.setenv("PAYQR_IMAGE_SIZE", value)
    reloaded = importlib.reload(settings)
    assert reloaded.IMAGE_SIZE == 512


def test_quiet_zone_override(monkeypatch):
    monkeypatch.setenv("PAYQR_QUIET_ZONE", "0")
    reloaded = importlib.reload(settings)
    assert reloaded.QUIET_ZONE == 0


@pytest.mark.parametrize("value", ["1", "ja", "True", " yes "])
def test_log_payloads_flag(monkeypatch, value):
    monkeypatch.setenv("PAYQR_LOG_PAYLOADS", value)
    reloaded = importlib.reload(settings)
    assert reloaded.LOG_PAYLOADS is True


def test_configured_image_size_is_used(monkeypatch, domestic_payment):
    from io import BytesIO

    from PIL import Image

    monkeypatch.setenv("PAYQR_IMAGE_SIZE", "200")
    importlib.reload(settings)

    png = domestic_payment.qr().to_image()

    with Image.open(BytesIO(png)) as image:
        assert image.size == (200, 200)
