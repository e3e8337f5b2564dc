"""
Test configuration for the IP Ranges test suite.
"""

import os
import sys
import pytest

# Add the parent directory to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

SAMPLE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<group name="Example Cloud">
  <!-- published ranges -->
  <region name=" eu-west " description="Europe (West)">
    <range network="10.0.0.0/24"/>
    <range from="10.0.1.0" to="10.0.1.9"/>
  </region>
  <region name="us-east">
    <range network="2001:db8::/32" from="2001:db8::" to="2001:db8:ffff:ffff:ffff:ffff:ffff:ffff"/>
  </region>
</group>
"""

def pytest_configure(config):
    """Set up test environment."""
    config.addinivalue_line("markers", "integration: tests exercising several modules together")

@pytest.fixture
def sample_xml():
    """A well-formed ranges document with two regions."""
    return SAMPLE_XML

@pytest.fixture
def ranges_dir(tmp_path):
    """A directory holding well-formed, malformed and unrelated source files."""
    (tmp_path / "cloud").mkdir()
    (tmp_path / "cloud" / "example.xml").write_text(SAMPLE_XML, encoding="utf-8")
    (tmp_path / "cloud" / "broken.xml").write_text(
        '<group name="Broken"><region name="r1"><range network="10.0.0.0/8"/></group>',
        encoding="utf-8"
    )
    (tmp_path / "other.xml").write_text(
        '<group name="Other"><region name="r"><range from="192.0.2.1" to="192.0.2.1"/></region></group>',
        encoding="utf-8"
    )
    (tmp_path / "notes.txt").write_text("not a ranges document", encoding="utf-8")
    return tmp_path
