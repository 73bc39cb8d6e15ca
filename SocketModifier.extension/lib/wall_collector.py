# -*- coding: utf-8 -*-
"""Wall collection for linked architectural documents.

Walls are read from linked documents together with their IFC material
tag and bounding box. The material tag lives in a string parameter
whose definition name contains ``IfcMaterial`` (the IFC exporter's
naming), optionally preceded by exact names configured in the rules.

Example:
    >>> from wall_collector import MaterialLookup, collect_walls
    >>> walls = collect_walls(linked_docs, MaterialLookup())
    >>> [w.material for w in walls]
    ['Gips', None, 'Beton']
"""
from typing import Iterable, List, Optional, Sequence

from pyrevit import DB


DEFAULT_MATERIAL_PARAM_CONTAINS = "IfcMaterial"


class MaterialLookup(object):
    """Where to read a wall's material from.

    Args:
        exact_names: Parameter names tried first, in order, via
            ``LookupParameter``. The first one present wins.
        name_contains: Substring matched against every parameter's
            definition name when no exact name is present. The last
            matching parameter in ``element.Parameters`` order wins.
    """

    def __init__(
        self,
        exact_names: Optional[Sequence[str]] = None,
        name_contains: Optional[str] = DEFAULT_MATERIAL_PARAM_CONTAINS,
    ):
        self.exact_names = list(exact_names or [])
        self.name_contains = name_contains

    @classmethod
    def from_rules(cls, rules: dict) -> "MaterialLookup":
        return cls(
            exact_names=rules.get("wall_material_param_names") or [],
            name_contains=rules.get("wall_material_param_contains", DEFAULT_MATERIAL_PARAM_CONTAINS),
        )

    def find_parameter(self, element):
        for name in self.exact_names:
            param = element.LookupParameter(name)
            if param is not None:
                return param

        if not self.name_contains:
            return None

        found = None
        for param in element.Parameters:
            if self.name_contains in param.Definition.Name:
                found = param
        return found


class WallRecord(object):
    """A linked wall with its material tag and bounding box."""

    def __init__(self, element, material: Optional[str] = None, box=None, document=None):
        self.element = element
        self.material = material
        self.box = box
        self.document = document

    @property
    def name(self) -> str:
        try:
            return self.element.Name or u""
        except Exception:
            return u""

    def __repr__(self) -> str:
        return "WallRecord({!r}, material={!r})".format(self.name, self.material)


def read_wall_material(element, lookup: Optional[MaterialLookup] = None) -> Optional[str]:
    """Return the wall's material string, or None when it carries none.

    An empty string returned by the host is passed through unchanged.
    """
    lookup = lookup or MaterialLookup()
    param = lookup.find_parameter(element)
    if param is None:
        return None
    return param.AsString()


def wall_bounding_box(element):
    """Model bounding box of the element, None when not computable."""
    return element.get_BoundingBox(None)


def iter_wall_elements(doc) -> Iterable:
    return DB.FilteredElementCollector(doc).OfCategory(DB.BuiltInCategory.OST_Walls)


def collect_walls(documents, lookup: Optional[MaterialLookup] = None) -> List[WallRecord]:
    """Collect every wall of every document, in document then collector order."""
    lookup = lookup or MaterialLookup()
    records = []
    for doc in documents or []:
        for element in iter_wall_elements(doc):
            records.append(WallRecord(
                element,
                material=read_wall_material(element, lookup),
                box=wall_bounding_box(element),
                document=doc,
            ))
    return records
