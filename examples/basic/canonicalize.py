"""Canonicalize markup in one call: parse, then render back."""

from tejido import Markup

md = Markup()
print(md("#   Title   \n\n\n-  one\n-  two\n\nSome *text*.  \nNext line.\n"))
