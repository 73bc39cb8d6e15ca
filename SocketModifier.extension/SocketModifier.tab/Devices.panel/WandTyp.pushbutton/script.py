# -*- coding: utf-8 -*-
"""Write the IFC material of linked walls into WandTyp of adjacent devices."""

from pyrevit import HOST_APP, revit, script

import batch_updater
import config_loader
import link_reader
from utils_revit import alert, log_exception


doc = revit.doc
output = script.get_output()
logger = script.get_logger()


def main():
    rules = config_loader.load_rules()
    report = batch_updater.update_devices(HOST_APP.app, doc, rules=rules, logger=logger)

    output.print_md('# WandTyp from linked walls')
    output.print_md('Active document: `{0}`'.format(link_reader.document_title(doc)))

    if not report.linked_documents:
        output.print_md('**No linked documents loaded.**')
        return

    output.print_md('* Linked documents: **{0}**'.format(report.linked_documents))
    output.print_md('* Walls: **{0}** (with material: {1}, without bounding box: {2})'.format(
        report.walls, report.walls_with_material, report.walls_without_box))
    output.print_md('* Devices written: **{0}** in {1} transaction(s)'.format(
        report.devices_written, report.transactions))

    touched = [(wall, n) for wall, n in report.per_wall if n]
    if touched:
        output.print_md('---')
        for wall, n in touched:
            output.print_md(u'* `{0}` -> {1}: {2} device(s)'.format(
                wall.name, wall.material if wall.material is not None else u'-', n))


if __name__ == '__main__':
    try:
        main()
    except Exception:
        log_exception('WandTyp: error')
        alert('Error. See the log for details.')
        raise
