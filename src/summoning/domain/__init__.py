"""Domain model and rules for the summoning board game.

The package is organised as:

* :mod:`enums` and :mod:`models` describe cells, the board and turn state.
* :mod:`rules_config` holds the tunable constants.
* :mod:`board`, :mod:`split` and :mod:`turn` are the pure rule functions.
* :mod:`events` defines the notifications presentation subscribes to.
* :mod:`game` wires everything into a :class:`~summoning.domain.game.GameSession`.

Submodules are imported explicitly by callers; :mod:`summoning.utils.hex_math`
depends on :mod:`enums`, so this package must not import the rule modules
eagerly.
"""
