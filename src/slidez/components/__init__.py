"""Components of slidez: the deck store and the key-value stores it persists to.

Components are wired together by the [`SettingsFactory`]\
[slidez.components.factory.SettingsFactory].
"""
