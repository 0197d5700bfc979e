"""Parse a tag file and print its outline."""

from tagmap import parse_default

SOURCE = """\
server web01
  port 8080
  tags frontend public

client
  retry 3
"""

for m in parse_default(SOURCE):
    print(f"{m.linum:>3} {'  ' * m.nesting}{m.label} = {m.mapping}")
