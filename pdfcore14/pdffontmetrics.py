#!/usr/bin/env python3

from types import MappingProxyType
from typing import NamedTuple

from .common import bare_glyphname

# =========================================================================== class CharMetrics

class CharMetrics(NamedTuple):
    '''
    Horizontal and vertical advance widths of a glyph, in 1/1000 of text space units
    (i.e. for a font size of 1000, the Type 1 AFM convention).
    '''
    glyph: str
    wx: float = 0
    wy: float = 0

NO_METRICS = CharMetrics('', 0, 0)

# =========================================================================== class GlyphMetricsTable

class GlyphMetricsTable:
    '''
    An immutable map from glyph names to CharMetrics for one font. The table is filled once,
    at construction, and there is no API to change it afterwards, so it can be shared by any
    number of fonts and threads.
    '''

    # --------------------------------------------------------------------------- __init__()

    def __init__(self, fontname:str, metrics:dict):
        '''
        Creates a table from a {glyphName: CharMetrics} dict; the dict is copied.
        Raises ValueError if for some key k: metrics[k].glyph != k.
        '''
        for gname, m in metrics.items():
            if m.glyph != gname:
                raise ValueError(f'{fontname}: metrics for glyph {gname} are labeled as {m.glyph}')
        self.fontname = fontname
        self.__metrics = MappingProxyType(dict(metrics))

    @classmethod
    def from_widths(cls, fontname:str, names:list, widths:list, wy:float = 0):
        '''
        Creates a table from parallel vectors of glyph names and their horizontal advance widths.
        '''
        if len(names) != len(widths):
            raise ValueError(f'{fontname}: {len(names)} glyph names but {len(widths)} widths')
        return cls(fontname, {name:CharMetrics(name, wx, wy) for name, wx in zip(names, widths)})

    # --------------------------------------------------------------------------- lookup()

    def lookup(self, gname:str):
        '''
        Returns a (CharMetrics, found) tuple. If the glyph is not in the table, returns
        (NO_METRICS, False): a zero width is not a sign of absence, so always check `found`.
        '''
        m = self.__metrics.get(bare_glyphname(gname))
        return (m, True) if m is not None else (NO_METRICS, False)

    def get_width(self, gname:str, default:float = None):
        '''
        Returns the horizontal advance width of the glyph, or default if the glyph is not in the table.
        '''
        m, found = self.lookup(gname)
        return m.wx if found else default

    @property
    def metrics(self):
        '''A read-only view of the {glyphName: CharMetrics} map'''
        return self.__metrics

    def __contains__(self, gname):
        return bare_glyphname(gname) in self.__metrics

    def __len__(self):
        return len(self.__metrics)

    def __iter__(self):
        return iter(self.__metrics)

    def __repr__(self):
        return f'{self.__class__.__name__}({self.fontname!r}, {len(self)} glyphs)'
