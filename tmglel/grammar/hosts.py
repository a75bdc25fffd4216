"""Grammar templates for every supported host language.

Templates are TOML fragments. ``@_ID``, ``@_SCOPE``, ``@_LIST`` and
``@_PATTERNS`` are replaced with the label's values; ``@_DRY_1`` and
``@_DRY_2`` splice in the host's dry fragments, which are themselves expanded
for the same label.
"""

from __future__ import annotations

from tmglel.grammar.models import HostLanguage

JAVASCRIPT = HostLanguage(
    id="javascript",
    name="JavaScript",
    scope="source.js",
    prelude=r"""[[patterns]] #
begin = '\${'
beginCaptures.0.name = 'punctuation.definition.template-expression.begin.js.tmglel'
end = '}'
endCaptures.0.name = 'punctuation.definition.template-expression.end.js.tmglel'
name = 'meta.template.expression.js.tmglel'
contentName = 'meta.embedded.line.js.tmglel'
patterns = [{ include = 'source.js' }]

""",
    content=r"""[[patterns]] # regexp
begin = '(//)\s*((?i:@_LIST))\W.*' # regexp
end = "(?<='|\"|`)"
beginCaptures.0.name = 'comment.line.double-slash.js.tmglel'
beginCaptures.1.name = 'punctuation.definition.comment.js.tmglel'
beginCaptures.2.name = 'fenced_code.block.language'

[[patterns.patterns]] # regexp
begin = "((')|(\"))|((`))"
@_DRY_1
[[patterns.patterns]]
include = 'source.js'

[[patterns]] # regexp
begin = '''(?<=/\*\s*(?i:@_LIST)(?:\W.*?)?\*/\s*)(?:((')|("))|((`)))'''
@_DRY_1
""",
    dry_1=r""" # regexp
end = '((\2)(?<!\\)(\3))((\5))'
contentName = 'meta.embedded.block.@_ID'
patterns = [{ include = '@_SCOPE' }]
beginCaptures.1.name = 'punctuation.definition.string.begin.js.tmglel'
beginCaptures.2.name = 'string.quoted.single.js.tmglel'
beginCaptures.3.name = 'string.quoted.double.js.tmglel'
beginCaptures.4.name = 'string.template.js.tmglel'
beginCaptures.5.name = 'punctuation.definition.string.template.begin.js.tmglel'
endCaptures.1.name = 'punctuation.definition.string.end.js.tmglel'
endCaptures.2.name = 'string.quoted.single.js.tmglel'
endCaptures.3.name = 'string.quoted.double.js.tmglel'
endCaptures.4.name = 'string.template.js.tmglel'
endCaptures.5.name = 'punctuation.definition.string.template.end.js.tmglel'
""",
)

RHAI = HostLanguage(
    id="rhai",
    name="Rhai",
    scope="source.rhai",
    prelude=r"""[[patterns]]
begin = '\${'
beginCaptures.0.name = 'punctuation.section.interpolation.begin.rhai.tmglel'
end = '}'
endCaptures.0.name = 'punctuation.section.interpolation.end.rhai.tmglel'
name = 'meta.interpolation.rhai.tmglel'
patterns = [{ include = 'source.rhai'}]

""",
    content=r"""[[patterns]] # regexp
begin = '(//)\s*((?i:@_LIST))\W.*' # regexp
end = '(?<=`|")'
beginCaptures.0.name = 'comment.line.double-slash.rhai.tmglel'
beginCaptures.1.name = 'punctuation.definition.comment.double-slash.rhai.tmglel'
beginCaptures.2.name = 'fenced_code.block.language'

[[patterns.patterns]] # regexp
begin = '((`))|(("))'
@_DRY_1
[[patterns.patterns]]
include = 'source.rhai'

[[patterns]] # regexp
begin = '(?<=/\*\s*(?i:@_LIST)(?:\W.*?)?\*/\s*)(?:((`))|((")))'
@_DRY_1
""",
    dry_1=r""" # regexp
end = '((\2))(?<!\\)((\4))'
contentName = 'meta.embedded.block.@_ID'
patterns = [{ include = '@_SCOPE' }]
beginCaptures.1.name = 'string.interpolated.rhai.tmglel'
beginCaptures.2.name = 'punctuation.definition.string.begin.rhai.tmglel'
beginCaptures.3.name = 'string.quoted.double.rhai.tmglel'
beginCaptures.4.name = 'punctuation.definition.string.begin.rhai.tmglel'
endCaptures.1.name = 'string.interpolated.rhai.tmglel'
endCaptures.2.name = 'punctuation.definition.string.end.rhai.tmglel'
endCaptures.3.name = 'string.quoted.double.rhai.tmglel'
endCaptures.4.name = 'punctuation.definition.string.end.rhai.tmglel'
""",
)

RUST = HostLanguage(
    id="rust",
    name="Rust",
    scope="source.rust",
    prelude=r"""[repository.interpolation] # regexp
match = '({)(?=\S).*?(?<=\S)(})'
name = 'meta.interpolation.rust.tmglel'
captures.1.name = 'punctuation.definition.interpolation.rust.tmglel'
captures.2.name = 'punctuation.definition.interpolation.rust.tmglel'

""",
    content=r"""[[patterns]] # regexp
begin = '(?<=//\s*(?i:@_LIST)\W.*)' # regexp
end = '(?<!\\)(?<="#*)'

[[patterns.patterns]] # regexp
begin = '(b)?(r)?(#*)?(")'
@_DRY_1
[[patterns.patterns]]
include = 'source.rust'

[[patterns]] # regexp
begin = '(?<=/\*\s*(?i:@_LIST)(?:\W.*?)?\*/\s*)(b)?(r)?(#*)?(")'
@_DRY_1
""",
    dry_1=r""" # regexp
end = '(?<!\\)(")(\3)'
contentName = 'meta.embedded.block.@_ID'
patterns = [{ include = '#interpolation' }, { include = '@_SCOPE' }]

beginCaptures.0.name = 'string.quoted.double.rust.tmglel'
beginCaptures.1.name = 'string.quoted.byte.raw.rust.tmglel'
beginCaptures.2.name = 'string.quoted.byte.raw.rust.tmglel'
beginCaptures.3.name = 'punctuation.definition.string.raw.rust.tmglel'
beginCaptures.4.name = 'punctuation.definition.string.rust.tmglel'

endCaptures.0.name = 'string.quoted.double.rust.tmglel'
endCaptures.1.name = 'punctuation.definition.string.rust.tmglel'
endCaptures.2.name = 'punctuation.definition.string.raw.rust.tmglel'
""",
)

TOML = HostLanguage(
    id="toml",
    name="TOML",
    scope="source.toml",
    prelude="",
    content=r"""[[patterns]] # regexp
begin = '(?<=#\s*(?i:@_LIST)\W.*)' # regexp
end = "(?<='''|\"\"\"|'|\")"

[[patterns.patterns]] # regexp
begin = "(?<!^)(?:(''')|(\"\"\")|(')|(\"))" # regexp
end = '(\1)(\2)(\3)(?<!\\)(\4)'
contentName = 'meta.embedded.block.@_ID'
patterns = [{ include = '@_SCOPE' }]

[patterns.patterns.captures]
1.name = 'string.quoted.triple.literal.block.toml.tmglel'
2.name = 'string.quoted.triple.basic.block.toml.tmglel'
3.name = 'string.quoted.single.literal.line.toml.tmglel'
4.name = 'string.quoted.single.basic.line.toml.tmglel'

[[patterns.patterns]]
include = 'source.toml'
""",
)

# TODO: quoted single-line YAML scalars are not matched yet; only block
# scalars introduced by a labeled comment get an embedded scope.
YAML = HostLanguage(
    id="yaml",
    name="YAML",
    scope="source.yaml",
    prelude="",
    content=r"""[[patterns]] # regexp
begin = '(?<=^(\s*)(?:-( ))?.*?:\s+)(\|)?(>)?(-)?\s*((#)\s*((?i:@_LIST))\W.*)' # regexp
while = '^\1\2\2  '
contentName = 'meta.embedded.block.@_ID'
patterns = [{ include = '@_SCOPE' }]

[patterns.beginCaptures]
3.name = 'keyword.control.flow.block-scalar.literal.yaml.tmglel'
4.name = 'keyword.control.flow.block-scalar.folded.yaml.tmglel'
5.name = 'storage.modifier.chomping-indicator.yaml.tmglel'
6.name = 'comment.line.number-sign.yaml.tmglel'
7.name = 'punctuation.definition.comment.yaml.tmglel'
8.name = 'fenced_code.block.language'
""",
)

HOST_LANGUAGES: tuple[HostLanguage, ...] = (JAVASCRIPT, RHAI, RUST, TOML, YAML)

HOST_LANGUAGES_BY_ID: dict[str, HostLanguage] = {host.id: host for host in HOST_LANGUAGES}
