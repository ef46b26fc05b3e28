"""Shared test fixtures."""

import pytest


# ── Sample XML Content ───────────────────────────────────────────────────

CALCULATOR = 'ComponentInfo{com.android.calculator2/com.android.calculator2.Calculator}'
CAMERA = 'ComponentInfo{com.android.camera/com.android.camera.Camera}'
CLOCK = 'ComponentInfo{com.android.deskclock/com.android.deskclock.DeskClock}'
WHATSAPP = 'ComponentInfo{com.whatsapp/com.whatsapp.Main}'
TELEGRAM = 'ComponentInfo{org.telegram.messenger/org.telegram.ui.LaunchActivity}'

APPFILTER_XML = """\
<?xml version="1.0" encoding="utf-8"?>
<resources>
    <iconback img1="iconback" />
    <!-- Calculator -->
    <item component="ComponentInfo{com.android.calculator2/com.android.calculator2.Calculator}" drawable="calculator" />
    <item component="ComponentInfo{com.android.camera/com.android.camera.Camera}" drawable="camera" />
    <!-- Clock -->
    <item component="ComponentInfo{com.android.deskclock/com.android.deskclock.DeskClock}" drawable="clock" />
</resources>
"""

SECOND_APPFILTER_XML = """\
<?xml version="1.0" encoding="utf-8"?>
<resources>
    <!-- Camera -->
    <item component="ComponentInfo{com.android.camera/com.android.camera.Camera}" drawable="camera_alt" />
    <!-- WhatsApp -->
    <item component="ComponentInfo{com.whatsapp/com.whatsapp.Main}" drawable="whatsapp" />
    <item component="ComponentInfo{org.telegram.messenger/org.telegram.ui.LaunchActivity}" drawable="telegram" />
</resources>
"""

ICON_PACK_XML = """\
<?xml version="1.0" encoding="utf-8"?>
<resources>
    <string-array name="icon_pack">
        <!-- Tools -->
        <item>calculator</item>
        <item>  camera </item>
    </string-array>
    <string-array name="latest">
        <item>clock</item>
    </string-array>
</resources>
"""

LICENSED_APPFILTER_XML = """\
<?xml version="1.0" encoding="utf-8"?>
<!-- Copyright 2024 Example Icons. Licensed under the Apache License 2.0 -->
<resources>
    <!-- Calculator -->
    <item component="ComponentInfo{com.android.calculator2/com.android.calculator2.Calculator}" drawable="calculator" />
</resources>
<!-- end of appfilter -->
"""

TOOLS_ICON_PACK_XML = """\
<?xml version="1.0" encoding="utf-8"?>
<resources xmlns:tools="http://schemas.android.com/tools" tools:ignore="ExtraTranslation">
    <string-array name="icon_pack" tools:ignore="MissingTranslation">
        <item>calculator</item>
    </string-array>
</resources>
"""

NOT_RESOURCES_XML = """\
<?xml version="1.0" encoding="utf-8"?>
<manifest package="com.example" />
"""

MALFORMED_XML = "<resources><item component='x' drawable='y'></resources"


def appfilter_with(components: list[str]) -> str:
    """Build an appfilter document with one item per component."""
    lines = ['<resources>']
    for idx, component in enumerate(components):
        lines.append(f'  <item component="{component}" drawable="icon{idx}" />')
    lines.append('</resources>')
    return '\n'.join(lines)


# ── Fixtures ─────────────────────────────────────────────────────────────

@pytest.fixture
def tmp_xml(tmp_path):
    """Write XML content to a temp file and return its path."""
    def _write(content: str, filename: str = "test.xml") -> str:
        path = tmp_path / filename
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def icon_dir(tmp_path):
    """Create a directory of fake PNG files and return its path."""
    def _make(*names: str, dirname: str = "icons") -> str:
        directory = tmp_path / dirname
        directory.mkdir(exist_ok=True)
        for name in names:
            (directory / name).write_bytes(b'\x89PNG' + name.encode('utf-8'))
        return str(directory)
    return _make
