"""Tests for knitting_parse public API and exports."""

import knitting_parse


class TestPublicAPI:
    def test_all_names_importable(self):
        """Every name in __all__ is actually importable from the package."""
        for name in knitting_parse.__all__:
            assert hasattr(knitting_parse, name), f"{name!r} in __all__ but not importable"

    def test_all_is_complete(self):
        """__all__ contains every public name defined in the package __init__.

        Submodule names (exposed by dir() when submodules are imported) are
        excluded; only callable/type exports belong in __all__.
        """
        import types as builtin_types

        submodules = {
            name
            for name in dir(knitting_parse)
            if isinstance(getattr(knitting_parse, name), builtin_types.ModuleType)
        }
        public_names = {
            name
            for name in dir(knitting_parse)
            if not name.startswith("_") and name not in submodules
        }
        missing = public_names - set(knitting_parse.__all__)
        assert not missing, f"Public names missing from __all__: {missing}"

    def test_parse_line_importable(self):
        from knitting_parse import Stitch, parse_line

        assert parse_line("k x2", 1) == [Stitch.K, Stitch.K]

    def test_pattern_functions_importable(self):
        from knitting_parse import Options, assemble, parse_directive, parse_pattern

        options = Options()
        parse_directive("## in_round", 1, options)
        assert assemble([], options).in_round is True
        assert parse_pattern("k\n").width == 1

    def test_error_types_importable(self):
        from knitting_parse import InvalidSyntaxRange, ParseError, extract_error_range

        err = ParseError(extract_error_range("k?", "?"), 1)
        assert err.error_type == InvalidSyntaxRange(1, 1)

    def test_subpackage_exports(self):
        import knitting_parse.api
        import knitting_parse.catalog
        import knitting_parse.grammar
        import knitting_parse.pattern

        for package in (
            knitting_parse.api,
            knitting_parse.catalog,
            knitting_parse.grammar,
            knitting_parse.pattern,
        ):
            for name in package.__all__:
                assert hasattr(package, name), f"{package.__name__}.{name} not importable"
