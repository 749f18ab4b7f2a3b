"""Preview layer — Apple-style and Google-style projections of a draft.

Renderers only read the draft and return immutable layout models.
They resolve image visibility through the layout registry and never
re-implement the strip exclusion rule.
"""
