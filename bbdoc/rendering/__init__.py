"""Rendering support for document nodes.

Contains:
- renderer_iface: loader/decoder Protocols and the DocumentNode protocol
- renderer: the BBCode renderer (MarkupRenderer + render)
- loaders: file-system and in-memory resource loaders
- codecs: suffix-dispatched pydantic decoding (JSON, YAML, plain text)
- options: RenderConfig
"""
