from vimbcore.handlers import HandlerRegistry


def make_registry():
    registry = HandlerRegistry()
    registry.add("mailto", "mailer %s")
    registry.add("magnet", "torrent-client %s")
    registry.add("ftp", "ftp-client")
    return registry


def test_lookup_by_scheme():
    registry = make_registry()
    assert registry.lookup("mailto:user@example.com") == "mailer %s"


def test_lookup_without_scheme_separator():
    assert make_registry().lookup("mailto") is None


def test_lookup_unknown_scheme():
    assert make_registry().lookup("http://example.com") is None


def test_command_substitutes_uri():
    registry = make_registry()
    uri = "mailto:user@example.com"
    assert registry.command_for(uri) == "mailer " + uri


def test_command_without_placeholder_and_percent_escape():
    registry = make_registry()
    registry.add("gopher", "fetch --rate=100%% %s")
    assert registry.command_for("ftp://example.com") == "ftp-client"
    assert registry.command_for("gopher://example.com") == "fetch --rate=100% gopher://example.com"


def test_command_for_unknown_is_none():
    assert make_registry().command_for("http://example.com") is None


def test_add_replaces_existing():
    registry = make_registry()
    registry.add("mailto", "other %s")
    assert registry.lookup("mailto:x") == "other %s"
    assert len(registry) == 3


def test_remove():
    registry = make_registry()
    assert registry.remove("mailto") is True
    assert "mailto" not in registry
    assert registry.remove("mailto") is False


def test_complete_prefix_and_all():
    registry = make_registry()
    assert registry.complete("ma") == ["magnet", "mailto"]
    assert registry.complete("") == ["ftp", "magnet", "mailto"]
    assert registry.complete("zz") == []