"""
# Pipeline Core — Pipegen

Este pacote define o **modelo de dados** de um pipeline e o conjunto
fechado de transformações conhecidas pelo tradutor.

## Componentes

- **types**
  - `PipelineConfig`, `TransformationSpec`, `TransformationType`

- **transformations**
  - `FilterTransformation`, `AggregationTransformation` (união etiquetada)

- **registry**
  - `TransformationRegistry`: tipo declarado → variante tipada

- **context**
  - `TranslationContext`: eventos e warnings de uma tradução

## Invariantes

- A ordem das transformações é preservada do início ao fim
- Um tipo fora do registry nunca é traduzido parcialmente
"""
