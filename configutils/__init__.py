"""
configutils - typed settings accessor and translation helpers.

Subpackages:
  - config: settings accessor, stores, parser registry, errors.
  - translation: the one-method Translator contract (From -> To).
"""
