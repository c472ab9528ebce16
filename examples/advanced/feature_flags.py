"""Switch syntax features off per processor or per context."""

from tejido import Markup, ParseConfig, parse, parse_config_context

source = "| a | b |\n|---|---|\n- [x] shipped"

print(type(Markup().parse(source).children[0]).__name__)
print(type(Markup(tables=False).parse(source).children[0]).__name__)

with parse_config_context(ParseConfig(task_lists_enabled=False)):
    doc = parse("- [x] shipped")
print("checked:", doc.children[0].items[0].checked)
