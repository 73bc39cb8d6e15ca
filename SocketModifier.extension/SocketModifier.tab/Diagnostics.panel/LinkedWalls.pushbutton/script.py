# -*- coding: utf-8 -*-
"""List linked walls with their IFC material. Read-only."""

from pyrevit import HOST_APP, revit, script

import batch_updater
import config_loader
import link_reader
import wall_collector


doc = revit.doc
output = script.get_output()
logger = script.get_logger()


links = link_reader.list_link_instances(doc)

output.print_md('# Diagnostics: Linked Walls')
output.print_md('Active document: `{0}`'.format(link_reader.document_title(doc)))
output.print_md('Found **{0}** link instance(s).'.format(len(links)))
for ln in links:
    output.print_md('* {0}: loaded **{1}**'.format(
        ln.Name, 'YES' if link_reader.is_link_loaded(ln) else 'NO'))

documents = link_reader.list_linked_documents(HOST_APP.app)
if not documents:
    output.print_md('**No linked documents loaded.**')
    script.exit()

lookup = wall_collector.MaterialLookup.from_rules(config_loader.load_rules())
total = 0
for linked in documents:
    walls = wall_collector.collect_walls([linked], lookup)
    total += len(walls)
    output.print_md('---')
    output.print_md('## {0}'.format(link_reader.document_title(linked)))
    output.print_md('```\n{0}\n```'.format(batch_updater.describe_walls(walls)))

logger.info('Listed %s wall(s) from %s linked document(s)', total, len(documents))
