import pytest

import pathfinder
from pathfinder.candidates import ExecutableQuery, Flavor, SearchPathGenerator
from pathfinder.config import load_config
from pathfinder.discovery import (
    DiscoveryResult,
    ExecutableNotFoundError,
    PathFinder,
    discover,
    require,
    resolve,
    search_paths,
)
from pathfinder.platforms import Platform
from pathfinder.probe import ExistenceProber
from pathfinder.protocols import CandidateSource


class FixedCandidates:
    """Candidate source returning a fixed list."""

    def __init__(self, paths):
        self.paths = paths

    def search_paths(self, query):
        return list(self.paths)


def _touch(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("", encoding="utf-8")
    return path


def test_public_api_exports():
    assert pathfinder.discover is discover
    assert pathfinder.search_paths is search_paths
    assert isinstance(pathfinder.__version__, str)


def test_generator_satisfies_protocol():
    assert isinstance(SearchPathGenerator(platform=Platform.LINUX), CandidateSource)
    assert isinstance(FixedCandidates([]), CandidateSource)


def test_module_search_paths_scenarios():
    assert search_paths("Interface", "local-release", False, platform="linux") == [
        "../build/Interface/Interface",
        "../build/Interface/Release/Interface",
    ]
    assert search_paths("domain-server", Flavor.LOCAL_DEBUG, False, platform="windows") == [
        "../build/domain-server/domain-server.exe",
        "../build/domain-server/Debug/domain-server.exe",
    ]


def test_discover_returns_first_existing_even_if_later_exist(tmp_path):
    first = _touch(tmp_path / "one" / "domain-server")
    _touch(tmp_path / "two" / "domain-server")
    finder = PathFinder(
        FixedCandidates(
            [
                str(tmp_path / "zero" / "domain-server"),
                str(first),
                str(tmp_path / "two" / "domain-server"),
            ]
        ),
        ExistenceProber(),
    )
    assert finder.discover(ExecutableQuery("domain-server")) == str(first)


def test_discover_not_found_is_none(tmp_path):
    finder = PathFinder(FixedCandidates([]), ExistenceProber())
    result = finder.resolve(ExecutableQuery("domain-server"))
    assert result.path is None
    assert not result.found
    assert not result
    assert result.searched == ()

    finder = PathFinder(FixedCandidates([str(tmp_path / "nope")]), ExistenceProber())
    assert finder.discover(ExecutableQuery("domain-server")) is None


def test_resolve_reports_searched_paths(tmp_path):
    target = _touch(tmp_path / "Release" / "assignment-client")
    candidates = [str(tmp_path / "assignment-client"), str(target)]
    finder = PathFinder(FixedCandidates(candidates), ExistenceProber())
    result = finder.resolve(ExecutableQuery("assignment-client", "local-release"))
    assert result == DiscoveryResult(
        query=ExecutableQuery("assignment-client", Flavor.LOCAL_RELEASE),
        path=str(target),
        searched=tuple(candidates),
    )
    assert result.unwrap() == str(target)


def test_unwrap_raises_with_searched_paths():
    result = DiscoveryResult(ExecutableQuery("Interface"), None, ["/a", "/b"])
    with pytest.raises(ExecutableNotFoundError) as excinfo:
        result.unwrap()
    assert excinfo.value.name == "Interface"
    assert excinfo.value.searched_paths == ["/a", "/b"]
    assert "Searched: /a, /b" in str(excinfo.value)
    assert "No candidate paths" in str(ExecutableNotFoundError("Interface", []))


def test_module_helpers_probe_build_tree(tmp_path, monkeypatch):
    project = tmp_path / "console"
    project.mkdir()
    target = _touch(tmp_path / "build" / "domain-server" / "Debug" / "domain-server")
    monkeypatch.chdir(project)

    found = discover("domain-server", "local-debug", False, platform="linux")
    assert found == "../build/domain-server/Debug/domain-server"
    assert (project / found).resolve() == target.resolve()
    assert resolve("domain-server", platform="linux").found
    assert require("domain-server", platform="linux") == found
    assert discover("domain-server", "local-release", False, platform="linux") is None
    with pytest.raises(ExecutableNotFoundError):
        require("assignment-client", platform="linux")


def test_from_config_applies_settings(tmp_path):
    (tmp_path / "pathfinder.yaml").write_text(
        "build_root: /srv/build\n"
        "components_bundle: Extras.app\n"
        "stat_timeout: 1.5\n"
        "executable_path: /Applications/Sandbox.app/Contents/MacOS/console\n"
        "remappings:\n"
        "  - platform: macos\n"
        "    packaged: true\n"
        "    from: domain-server\n"
        "    to: Sandbox Server\n",
        encoding="utf-8",
    )
    config = load_config(tmp_path, env={})
    finder = PathFinder.from_config(config, platform=Platform.MACOS)
    assert finder.prober.stat_timeout == 1.5
    assert finder.search_paths(ExecutableQuery("assignment-client")) == [
        "/srv/build/assignment-client/assignment-client",
        "/srv/build/assignment-client/Debug/assignment-client",
    ]
    packaged = finder.search_paths(ExecutableQuery("domain-server", packaged=True))
    assert packaged == [
        "/Applications/Sandbox.app/Contents/MacOS/Sandbox Server",
        "/Applications/Sandbox.app/Contents/MacOS/Extras.app/Contents/MacOS/Sandbox Server",
        "/Applications/Sandbox Server",
    ]
    # default remapping survives config extensions
    interface = finder.search_paths(ExecutableQuery("Interface", packaged=True))
    assert interface[0].endswith("High Fidelity.app/Contents/MacOS/High Fidelity")


def test_discovery_result_is_hashable():
    result = DiscoveryResult(ExecutableQuery("Interface"), None, ["/a", "/b"])
    assert result.searched == ("/a", "/b")
    same = DiscoveryResult(ExecutableQuery("Interface"), None, ("/a", "/b"))
    assert hash(result) == hash(same)
    assert len({result, same}) == 1
