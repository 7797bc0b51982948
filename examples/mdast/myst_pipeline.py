"""Run the plugin over an mdast tree, the shape MyST hands to plugins."""

import json

from indexnum import IndexNumPlugin

tree = {
    "type": "root",
    "children": [
        {"type": "heading", "depth": 1, "children": [{"type": "text", "value": "Waves"}]},
        {"type": "mystDirective", "name": "index-num", "value": "single: amplitude\npair: wave; phase"},
        {"type": "heading", "depth": 3, "children": [{"type": "text", "value": "Skipped level"}]},
        {"type": "mystDirective", "name": "index-num", "args": "frequency, amplitude"},
        {"type": "mystDirective", "name": "show-index-num"},
    ],
}

plugin = IndexNumPlugin()
print(json.dumps(plugin.run_mdast(tree), indent=2, ensure_ascii=False))
