"""
Integration tests for multi-source parsing.
"""

import io
import os
import sys
import pytest
from unittest.mock import MagicMock

# Add the parent directory to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from ipranges.core.exceptions import ConsistencyError, SourceError, StructuralError
from ipranges.sources import Source, parse_all, parse_directory, sources_from_directory

GOOD = b'<group name="Good"><region name="r"><range network="10.0.0.0/8"/></region></group>'
MALFORMED = b'<group name="Bad"><region name="r"><range network="10.0.0.0/8"></region></group>'
INCONSISTENT = b'<group name="Odd"><region name="r"><range network="10.0.0.0/8" to="10.0.0.1"/></region></group>'


@pytest.mark.integration
class TestParseAll:
    """Integration tests for parse_all and directory discovery."""

    def test_malformed_source_is_skipped(self):
        sources = [Source.from_bytes("bad.xml", MALFORMED), Source.from_bytes("good.xml", GOOD)]
        groups = list(parse_all(sources))
        assert [group.name for group in groups] == ["Good"]

    def test_malformed_source_is_logged(self, caplog):
        list(parse_all([Source.from_bytes("bad.xml", MALFORMED)]))
        assert "bad.xml" in caplog.text

    def test_consistency_error_propagates(self):
        sources = [Source.from_bytes("good.xml", GOOD), Source.from_bytes("odd.xml", INCONSISTENT)]
        groups = parse_all(sources)
        assert next(groups).name == "Good"
        with pytest.raises(ConsistencyError):
            next(groups)

    def test_structural_error_propagates(self):
        with pytest.raises(StructuralError):
            list(parse_all([Source.from_bytes("other.xml", b"<ranges/>")]))

    def test_name_prefix_filter(self):
        sources = [Source.from_bytes("aws/ranges.xml", GOOD), Source.from_bytes("gcp/ranges.xml", MALFORMED)]
        groups = list(parse_all(sources, name_prefix="aws/"))
        assert len(groups) == 1

    def test_suffix_filter(self):
        sources = [Source.from_bytes("ranges.txt", GOOD)]
        assert list(parse_all(sources)) == []
        assert len(list(parse_all(sources, suffix=None))) == 1

    def test_enumeration_is_lazy(self):
        opener = MagicMock(return_value=io.BytesIO(GOOD))
        sources = [Source.from_bytes("first.xml", GOOD), Source("second.xml", opener)]
        groups = parse_all(sources)
        assert next(groups).name == "Good"
        opener.assert_not_called()

    def test_sources_are_closed(self):
        stream = io.BytesIO(GOOD)
        list(parse_all([Source("good.xml", lambda: stream)]))
        assert stream.closed

    def test_directory_discovery(self, ranges_dir):
        names = [source.name for source in sources_from_directory(str(ranges_dir))]
        assert names == ["cloud/broken.xml", "cloud/example.xml", "other.xml"]

    def test_parse_directory(self, ranges_dir):
        groups = list(parse_directory(str(ranges_dir)))
        assert [group.name for group in groups] == ["Example Cloud", "Other"]
        assert groups[0].range_count() == 3

    def test_parse_directory_with_prefix(self, ranges_dir):
        groups = list(parse_directory(str(ranges_dir), name_prefix="cloud/"))
        assert [group.name for group in groups] == ["Example Cloud"]

    def test_missing_directory(self, tmp_path):
        with pytest.raises(SourceError):
            list(sources_from_directory(str(tmp_path / "missing")))
