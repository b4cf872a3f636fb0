"""Pairwise kerning lookup.

Kerning comes from the legacy 'kern' table when the font has one: only the
first subtable is consulted and only if it is a format 0 pair list, which is
how stb_truetype derived rasterizers read it. Fonts without a 'kern' table
fall back to the pair adjustment lookups of the GPOS 'kern' feature.
"""

from typing import Any

from fontTools.ttLib import TTFont

# GPOS lookup types
PAIR_ADJUSTMENT = 2
EXTENSION = 9


def _x_advance(value_record: Any) -> int:
    if value_record is None:
        return 0
    return getattr(value_record, "XAdvance", 0) or 0


class KerningTable:
    """Kerning values in font units, keyed by glyph names.

    Example:
        kerning = KerningTable.from_font(TTFont("font.ttf"))
        kerning.get("A", "V")  # -> -80
    """

    def __init__(
        self,
        pairs: dict[tuple[str, str], int] | None = None,
        pair_subtables: list[Any] | None = None,
    ) -> None:
        """Initialize the kerning table.

        Args:
            pairs: Flat (left, right) -> value pairs from a 'kern' table
            pair_subtables: GPOS PairPos subtables, searched in order
        """
        self._pairs = pairs or {}
        self._subtables = pair_subtables or []
        self._coverage = [
            {name: index for index, name in enumerate(sub.Coverage.glyphs)}
            for sub in self._subtables
        ]
        self._cache: dict[tuple[str, str], int] = {}

    @classmethod
    def from_font(cls, font: TTFont) -> "KerningTable":
        """Read kerning data from a font."""
        if "kern" in font:
            tables = font["kern"].kernTables
            if tables and getattr(tables[0], "format", None) == 0:
                return cls(pairs=dict(tables[0].kernTable))
            return cls()
        return cls(pair_subtables=_gpos_pair_subtables(font))

    def __len__(self) -> int:
        return len(self._pairs) + len(self._subtables)

    def get(self, left: str, right: str) -> int:
        """Get the kerning between two glyphs.

        Args:
            left: Name of the preceding glyph
            right: Name of the following glyph

        Returns:
            Horizontal adjustment in font units (0 when the pair is not kerned)
        """
        if self._pairs:
            return self._pairs.get((left, right), 0)

        key = (left, right)
        if key not in self._cache:
            self._cache[key] = self._lookup_gpos(left, right)
        return self._cache[key]

    def _lookup_gpos(self, left: str, right: str) -> int:
        for sub, coverage in zip(self._subtables, self._coverage):
            index = coverage.get(left)
            if index is None:
                continue

            if sub.Format == 1:
                for record in sub.PairSet[index].PairValueRecord:
                    if record.SecondGlyph == right:
                        return _x_advance(getattr(record, "Value1", None))
            elif sub.Format == 2:
                first = sub.ClassDef1.classDefs.get(left, 0) if sub.ClassDef1 else 0
                second = sub.ClassDef2.classDefs.get(right, 0) if sub.ClassDef2 else 0
                record = sub.Class1Record[first].Class2Record[second]
                return _x_advance(getattr(record, "Value1", None))

        return 0


def _gpos_pair_subtables(font: TTFont) -> list[Any]:
    """Collect the PairPos subtables referenced by the GPOS 'kern' feature."""
    if "GPOS" not in font:
        return []

    table = font["GPOS"].table
    if table.FeatureList is None or table.LookupList is None:
        return []

    lookup_indices = sorted(
        {
            index
            for record in table.FeatureList.FeatureRecord
            if record.FeatureTag == "kern"
            for index in record.Feature.LookupListIndex
        }
    )

    subtables = []
    for lookup_index in lookup_indices:
        lookup = table.LookupList.Lookup[lookup_index]
        for sub in lookup.SubTable:
            if lookup.LookupType == EXTENSION:
                if sub.ExtensionLookupType != PAIR_ADJUSTMENT:
                    continue
                sub = sub.ExtSubTable
            elif lookup.LookupType != PAIR_ADJUSTMENT:
                continue
            subtables.append(sub)

    return subtables
