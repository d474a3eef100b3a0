from __future__ import annotations

"""
JavaScript (ES module) generator.
"""

import json
from string import Template

from embedfiles.core.generators.base import GENERATED_NOTICE, CodeGenerator
from embedfiles.domain.tree_models import Tree

_MODULE_TEMPLATE = Template("""\
// $notice

function Base64ToUint8Array(b64) {
  const binary = atob(b64);
  const bytes = new Uint8Array(binary.length);
  for (let i = 0; i < binary.length; i++) {
    bytes[i] = binary.charCodeAt(i);
  }
  return bytes;
}

const embed = $files;
const get = (value) => Base64ToUint8Array(value);
const getString = (value) => new TextDecoder().decode(get(value));

export default {
  files: embed,
  get,
  getString,
};
""")


class JavaScriptGenerator(CodeGenerator):
    """Emit an ES module whose default export bundles the files and accessors."""

    language = "js"
    extension = "js"
    display_name = "JavaScript"

    def generate(self, tree: Tree) -> str:
        # JSON.parse keeps "__proto__" as an own key; a literal would set the prototype
        payload = json.dumps(tree, sort_keys=True, ensure_ascii=True, separators=(",", ":"))
        literal = f"JSON.parse({json.dumps(payload)})"
        return _MODULE_TEMPLATE.substitute(notice=GENERATED_NOTICE, files=literal)
