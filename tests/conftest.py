import pytest

TRAIN_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<Zusi>
<Info DateiTyp="Zug" Version="A.1" MinVersion="A.1"/>
<!-- generated by the timetable editor -->
<Zug Gattung="RB" Nummer="12345" APBeschl="{apbeschl}">
{entries}
<FahrzeugVarianten Bezeichnung="default">
{consist}
</FahrzeugVarianten>
</Zug>
</Zusi>
"""

DEFAULT_ENTRIES = """<FahrplanEintrag Ank="2024-01-31 23:59:30" Betrst="Anfang"/>
<FahrplanEintrag Ank="2024-02-01 00:10:00" Abf="2024-02-01 00:12:00" Betrst="Mitte"/>
<FahrplanEintrag Abf="2024-02-01 00:20:00" Betrst="Durchfahrt"/>
<FahrplanEintrag Ank="2024-02-01 00:30:00" Betrst="Ende"/>"""

MU_CONSIST = """<FahrzeugInfo IDHaupt="1"><Datei Dateiname="RollingStock\\Deutschland\\Triebwagen\\ET425.rv.fzg"/></FahrzeugInfo>
<FahrzeugInfo IDHaupt="2"><Datei Dateiname="RollingStock\\Deutschland\\Triebwagen\\ET426.rv.fzg"/></FahrzeugInfo>"""


def train_xml(apbeschl="1.5", entries=DEFAULT_ENTRIES, consist=MU_CONSIST):
    return TRAIN_TEMPLATE.format(apbeschl=apbeschl, entries=entries, consist=consist)


@pytest.fixture
def make_train():
    return train_xml


@pytest.fixture
def train_dir(tmp_path):
    directory = tmp_path / "Fahrplan"
    directory.mkdir()
    for name in ("RB_1.trn", "RB_2.trn"):
        (directory / name).write_text(train_xml(), encoding="utf-8")
    (directory / "Fahrplan.fpn").write_text("<Zusi/>", encoding="utf-8")
    return directory
