# -*- coding: utf-8 -*-
"""Write the material of linked walls into adjacent device parameters.

For every wall of every linked document, the host devices whose bounding
box intersects the wall's bounding box get the wall's material written
into their ``WandTyp`` parameter. Each wall is processed in its own
transaction: a failure rolls back that wall only, walls committed
before it stay committed.

A device touched by several walls keeps the value of the last wall in
enumeration order (linked documents in session order, walls in
collector order).

Example:
    >>> from batch_updater import update_devices
    >>> report = update_devices(app, doc)
    >>> report.devices_written
    42
"""
from typing import List, Optional, Tuple

import config_loader
import device_matching
import link_reader
import wall_collector
from utils_revit import safe_log, element_name, tx


DEVICE_PARAM_NAME = "WandTyp"
TRANSACTION_NAME = "Adding Parameter"


class MissingParameterError(LookupError):
    """A matched device has no parameter to receive the wall material."""

    def __init__(self, element, param_name: str):
        self.element = element
        self.param_name = param_name
        super().__init__(
            "Device {0} (Id {1}) has no parameter '{2}'".format(
                element_name(element), getattr(element, "Id", "?"), param_name
            )
        )


def set_string(param, value: Optional[str]) -> None:
    """Set a string parameter; None included.

    Under IronPython a None argument matches both Set(String) and
    Set(ElementId), so the String overload is picked explicitly.
    """
    overloads = getattr(param.Set, "Overloads", None)
    if overloads is not None:
        overloads[str](value)
    else:
        param.Set(value)


class UpdateReport(object):
    """Counters collected during one run."""

    def __init__(self):
        self.linked_documents = 0
        self.walls = 0
        self.walls_with_material = 0
        self.walls_without_box = 0
        self.devices_written = 0
        self.transactions = 0
        self.per_wall: List[Tuple[object, int]] = []

    def as_dict(self) -> dict:
        return {
            "linked_documents": self.linked_documents,
            "walls": self.walls,
            "walls_with_material": self.walls_with_material,
            "walls_without_box": self.walls_without_box,
            "devices_written": self.devices_written,
            "transactions": self.transactions,
        }


def apply_material(doc, devices, material: Optional[str], param_name: str = DEVICE_PARAM_NAME,
                   transaction_name: str = TRANSACTION_NAME) -> int:
    """Set `param_name` to `material` on every device in one transaction.

    Raises:
        MissingParameterError: a device lacks the parameter. The whole
            transaction is rolled back.

    Returns:
        Number of devices written; 0 without opening a transaction when
        `devices` is empty.
    """
    if not devices:
        return 0

    written = 0
    with tx(transaction_name, doc):
        for device in devices:
            param = device.LookupParameter(param_name)
            if param is None:
                raise MissingParameterError(device, param_name)
            set_string(param, material)
            written += 1
    return written


def update_devices(app, doc, rules: Optional[dict] = None, logger=None) -> UpdateReport:
    """Run the whole batch for the linked documents of `app` against `doc`."""
    rules = rules or config_loader.load_rules()
    categories = device_matching.resolve_categories(rules.get("device_categories"))
    lookup = wall_collector.MaterialLookup.from_rules(rules)
    param_name = rules.get("device_param_name") or DEVICE_PARAM_NAME
    transaction_name = rules.get("transaction_name") or TRANSACTION_NAME

    report = UpdateReport()
    documents = link_reader.list_linked_documents(app)
    report.linked_documents = len(documents)

    walls = wall_collector.collect_walls(documents, lookup)
    report.walls = len(walls)

    for wall in walls:
        if wall.material is not None:
            report.walls_with_material += 1
        if wall.box is None:
            report.walls_without_box += 1
            if logger is not None:
                safe_log(logger.debug, u"No bounding box for wall '%s', skipped", wall.name)
            continue

        devices = device_matching.find_wall_devices(doc, wall, categories)
        written = apply_material(doc, devices, wall.material, param_name, transaction_name)
        if written:
            report.transactions += 1
        report.devices_written += written
        report.per_wall.append((wall, written))

    if logger is not None:
        safe_log(
            logger.info,
            u"Linked documents=%s walls=%s with_material=%s no_box=%s devices_written=%s",
            report.linked_documents, report.walls, report.walls_with_material,
            report.walls_without_box, report.devices_written,
        )
    return report


def describe_walls(records) -> str:
    """One '<wall name> - <material>' line per wall record."""
    lines = []
    for record in records:
        material = record.material if record.material is not None else u""
        lines.append(u"{0} - {1}".format(record.name, material))
    return u"\n".join(lines)
