"""Tests for statustext.resolver.StatusTextResolver."""

import threading

from statustext.resolver import Resolution, StatusTextResolver


# ---------------------------------------------------------------------------
# lookup
# ---------------------------------------------------------------------------


def test_lookup_builtin():
    r = StatusTextResolver()
    assert r.lookup(200) == "OK"
    assert r.lookup(404) == "Not Found"
    assert r.lookup(418) == "I'm a teapot"


def test_lookup_unknown_is_empty():
    assert StatusTextResolver().lookup(999) == ""


def test_lookup_ignores_global_override():
    r = StatusTextResolver()
    r.set_global_status(200, "Fine")
    assert r.lookup(200) == "OK"


def test_custom_builtin_table():
    r = StatusTextResolver(builtin={299: "Odd"})
    assert r.lookup(299) == "Odd"
    assert r.lookup(200) == ""


# ---------------------------------------------------------------------------
# status_text
# ---------------------------------------------------------------------------


def test_status_text_global_wins():
    r = StatusTextResolver()
    r.set_global_status(404, "Gone Fishing")
    assert r.status_text(404) == "Gone Fishing"


def test_status_text_falls_back_to_builtin():
    assert StatusTextResolver().status_text(503) == "Service Unavailable"


def test_status_text_ignores_custom_overlay():
    r = StatusTextResolver()
    r.set_custom_status(777, "Hidden")
    assert r.status_text(777) == ""


# ---------------------------------------------------------------------------
# resolve
# ---------------------------------------------------------------------------


def test_resolve_builtin():
    assert StatusTextResolver().resolve(200) == Resolution(200, "OK", True)


def test_resolve_global_new_code():
    r = StatusTextResolver()
    r.set_global_status(777, "Custom")
    assert r.resolve(777) == (777, "Custom", True)


def test_resolve_global_overrides_builtin():
    r = StatusTextResolver()
    r.set_global_status(404, "Nope")
    assert r.resolve(404) == (404, "Nope", True)


def test_resolve_short_shift():
    r = StatusTextResolver()
    r.set_custom_status(200, "Shifted OK")
    assert r.resolve(220) == (200, "Shifted OK", True)


def test_builtin_code_never_reaches_custom_shift():
    r = StatusTextResolver()
    r.set_custom_status(180, "Shifted Continue")
    assert r.resolve(200) == (200, "OK", True)


def test_resolve_long_shift():
    r = StatusTextResolver()
    r.set_custom_status(404, "Deep Shift")
    assert r.resolve(644) == (404, "Deep Shift", True)


def test_resolve_short_shift_checked_before_long():
    r = StatusTextResolver()
    r.set_custom_status(660, "Short")
    r.set_custom_status(440, "Long")
    assert r.resolve(680) == (660, "Short", True)


def test_resolve_builtin_shadows_custom():
    r = StatusTextResolver()
    r.set_custom_status(404, "Custom 404")
    # 424 is Failed Dependency, so the shift is never tried
    assert r.resolve(424) == (424, "Failed Dependency", True)


def test_resolve_global_in_shift_range_shadows_custom():
    r = StatusTextResolver()
    r.set_custom_status(400, "Custom Bad Request")
    r.set_global_status(640, "Global 640")
    assert r.resolve(640) == (640, "Global 640", True)


def test_resolve_miss_keeps_original_code():
    assert StatusTextResolver().resolve(999) == Resolution(999, "", False)


def test_resolve_miss_with_unrelated_custom_entries():
    r = StatusTextResolver()
    r.set_custom_status(100, "x")
    assert r.resolve(700) == (700, "", False)


def test_resolve_not_gated_by_flag():
    r = StatusTextResolver()
    r.set_custom_status(500, "Custom 500")
    assert not r.enabled
    assert r.resolve(520) == (500, "Custom 500", True)


def test_resolve_empty_global_text_is_found():
    r = StatusTextResolver()
    r.set_global_status(799, "")
    assert r.resolve(799) == (799, "", True)


# ---------------------------------------------------------------------------
# writers and flag
# ---------------------------------------------------------------------------


def test_set_enabled_round_trip():
    r = StatusTextResolver()
    r.set_enabled(True)
    assert r.enabled is True
    r.set_enabled(False)
    assert r.enabled is False


def test_repeated_writes_are_idempotent():
    r = StatusTextResolver()
    r.set_global_status(777, "Custom")
    r.set_custom_status(400, "Custom 400")
    before = (r.global_overrides(), r.custom_overrides())
    r.set_global_status(777, "Custom")
    r.set_custom_status(400, "Custom 400")
    assert (r.global_overrides(), r.custom_overrides()) == before


def test_later_write_replaces_text():
    r = StatusTextResolver()
    r.set_custom_status(400, "first")
    r.set_custom_status(400, "second")
    assert r.resolve(640).text == "second"


def test_overrides_are_snapshots():
    r = StatusTextResolver()
    r.set_global_status(777, "Custom")
    snap = r.global_overrides()
    snap[777] = "changed"
    assert r.status_text(777) == "Custom"


def test_concurrent_writes_and_resolves():
    r = StatusTextResolver()
    errors = []

    def writer(base):
        for i in range(200):
            r.set_custom_status(base + i, f"text {base + i}")
            r.set_global_status(1000 + base + i, "g")

    def reader():
        try:
            for _ in range(200):
                r.resolve(644)
                r.status_text(404)
        except Exception as exc:  # pragma: no cover
            errors.append(exc)

    threads = [threading.Thread(target=writer, args=(b,)) for b in (0, 200, 400)]
    threads += [threading.Thread(target=reader) for _ in range(3)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert errors == []
    assert len(r.custom_overrides()) == 600
    assert r.resolve(644) == (404, "text 404", True)


# ---------------------------------------------------------------------------
# resolve_unshifted
# ---------------------------------------------------------------------------


def test_resolve_unshifted_skips_custom_overlay():
    r = StatusTextResolver()
    r.set_custom_status(404, "Lost")
    assert r.resolve_unshifted(644) == Resolution(644, "", False)


def test_resolve_unshifted_empty_global_text_is_found():
    r = StatusTextResolver()
    r.set_global_status(799, "")
    assert r.resolve_unshifted(799) == Resolution(799, "", True)
