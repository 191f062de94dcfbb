"""Tests for fsroute.discovery.translate — file path to route string."""

import ntpath
import posixpath
from pathlib import Path

import pytest

from fsroute.discovery.translate import path_to_route


class TestPathToRoute:
    def test_parameter_directory_with_root_file(self) -> None:
        assert path_to_route("/routes/users/(id)/index.js", "/routes", "index") == "/users/:id/"

    def test_root_file_at_scan_root_is_router_root(self) -> None:
        assert path_to_route("/routes/index.js", "/routes", "index") == ""

    def test_plain_file(self) -> None:
        assert path_to_route("/routes/products/list.js", "/routes", "index") == "/products/list"

    def test_python_extension(self) -> None:
        assert path_to_route("/srv/app/routes/users/index.py", "/srv/app/routes") == "/users/"

    def test_parameter_file(self) -> None:
        assert path_to_route("/routes/users/(id).py", "/routes") == "/users/:id"

    def test_multiple_parameters(self) -> None:
        route = path_to_route("/routes/(org)/repos/(repo)/issues.py", "/routes")
        assert route == "/:org/repos/:repo/issues"

    def test_duplicate_parameter_names_pass_through(self) -> None:
        assert path_to_route("/routes/(id)/(id).py", "/routes") == "/:id/:id"

    def test_custom_root_file(self) -> None:
        assert path_to_route("/routes/docs/page.py", "/routes", "page") == "/docs/"
        assert path_to_route("/routes/docs/index.py", "/routes", "page") == "/docs/index"

    def test_root_file_stripped_as_trailing_text(self) -> None:
        assert path_to_route("/routes/products/reindex.js", "/routes", "index") == "/products/re"

    def test_directory_named_like_root_file(self) -> None:
        assert path_to_route("/routes/index/list.py", "/routes") == "/index/list"

    def test_trailing_separator_on_routes_dir(self) -> None:
        assert path_to_route("/routes/products/list.py", "/routes/") == "/products/list"

    def test_redundant_separators_and_dots_collapse(self) -> None:
        assert path_to_route("/routes//users/./list.py", "/routes") == "/users/list"
        assert path_to_route("/routes/users/../products/list.py", "/routes") == "/products/list"

    def test_accepts_path_objects(self) -> None:
        route = path_to_route(Path("/routes/users/(id)/index.py"), Path("/routes"))
        assert route == "/users/:id/"

    def test_file_without_extension(self) -> None:
        assert path_to_route("/routes/health", "/routes") == "/health"

    def test_outside_routes_dir_raises(self) -> None:
        with pytest.raises(ValueError, match="not a file inside"):
            path_to_route("/elsewhere/list.py", "/routes")

    def test_sibling_with_shared_prefix_raises(self) -> None:
        with pytest.raises(ValueError):
            path_to_route("/routes-old/list.py", "/routes")


class TestExtensionStripping:
    """Only the final segment's extension is removed."""

    def test_extension_text_in_directory_name_is_kept(self) -> None:
        assert path_to_route("/routes/a.js.d/x.js", "/routes") == "/a.js.d/x"

    def test_dotted_directory(self) -> None:
        assert path_to_route("/routes/a.b.c/x.py", "/routes") == "/a.b.c/x"

    def test_only_last_extension_of_file(self) -> None:
        assert path_to_route("/routes/feed.xml.py", "/routes") == "/feed.xml"

    def test_dotfile_has_no_extension(self) -> None:
        assert path_to_route("/routes/.well-known", "/routes") == "/.well-known"


class TestPlatformSeparators:
    def test_windows_paths(self) -> None:
        route = path_to_route(
            "C:\\app\\routes\\users\\(id)\\index.py",
            "C:\\app\\routes",
            pathmod=ntpath,
        )
        assert route == "/users/:id/"

    def test_windows_root_file(self) -> None:
        assert path_to_route("C:\\routes\\index.py", "C:\\routes", pathmod=ntpath) == ""

    def test_windows_accepts_forward_slashes(self) -> None:
        route = path_to_route("C:/routes/products/list.py", "C:/routes", pathmod=ntpath)
        assert route == "/products/list"

    def test_posix_backslash_is_part_of_name(self) -> None:
        route = path_to_route("/routes/a\\b.py", "/routes", pathmod=posixpath)
        assert route == "/a\\b"


class TestProperties:
    @pytest.mark.parametrize(
        "relative",
        [
            "index.py",
            "users/index.py",
            "users/list.py",
            "a/b/c/d.py",
            "v1.2/items.py",
            "deep/index/index.py",
        ],
    )
    def test_no_parameter_markers_without_parentheses(self, relative: str) -> None:
        route = path_to_route(f"/routes/{relative}", "/routes")
        assert ":" not in route
        assert "(" not in route
        assert ")" not in route

    @pytest.mark.parametrize(
        "relative",
        ["index.py", "users/(id)/index.py", "a.js.d/x.js", "products/list.py"],
    )
    def test_idempotent(self, relative: str) -> None:
        first = path_to_route(f"/routes/{relative}", "/routes", "index")
        second = path_to_route(f"/routes/{relative}", "/routes", "index")
        assert first == second

    def test_uses_forward_slashes_only(self) -> None:
        route = path_to_route("C:\\routes\\a\\b\\c.py", "C:\\routes", pathmod=ntpath)
        assert "\\" not in route
        assert route == "/a/b/c"
