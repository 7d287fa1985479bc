# tests/core/config/test_merge.py
"""
Testes do deep-merge de configuração de pipeline.

Os testes asseguram que:
- escalares do override sobrescrevem a base
- dicionários são mesclados recursivamente
- listas (ex.: `data_transformations`) são substituídas por inteiro
- conflitos estruturais levantam `ConfigTypeConflictError`
- nenhum input é mutado

Invariantes:
    - O merge é puramente funcional e determinístico
"""

import pytest

from pipegen.core.config.errors import ConfigTypeConflictError
from pipegen.core.config.merge import deep_merge


def test_merge_simple_override():
    """
    Verifica sobrescrita de escalar e preservação dos inputs.
    """
    base = {"pipeline_name": "p", "data_sink": "warehouse"}
    override = {"data_sink": "staging"}
    out = deep_merge(base, override)
    assert out == {"pipeline_name": "p", "data_sink": "staging"}
    assert base == {"pipeline_name": "p", "data_sink": "warehouse"}
    assert override == {"data_sink": "staging"}


def test_merge_nested_dict():
    base = {"meta": {"owner": "data", "tier": "gold"}}
    override = {"meta": {"tier": "silver"}}
    assert deep_merge(base, override) == {"meta": {"owner": "data", "tier": "silver"}}


def test_merge_transformations_list_replaced_whole():
    """
    Verifica que a lista de transformações é substituída, nunca mesclada.

    A ordem das transformações é semântica; mesclar elemento a elemento
    produziria pipelines que nenhum arquivo declara.
    """
    base = {"data_transformations": [{"type": "filter"}, {"type": "aggregation"}]}
    override = {"data_transformations": [{"type": "aggregation"}]}
    out = deep_merge(base, override)
    assert out == {"data_transformations": [{"type": "aggregation"}]}


def test_merge_scalar_type_change_is_allowed():
    base = {"value": 18}
    override = {"value": "18"}
    assert deep_merge(base, override) == {"value": "18"}


def test_merge_null_override_replaces():
    base = {"data_transformations": [{"type": "filter"}]}
    assert deep_merge(base, {"data_transformations": None}) == {"data_transformations": None}


@pytest.mark.parametrize(
    "base, override",
    [
        ({"data_source": "db"}, {"data_source": {"name": "db"}}),
        ({"meta": {"a": 1}}, {"meta": "flat"}),
        ({"data_transformations": []}, {"data_transformations": "filter"}),
    ],
)
def test_merge_type_conflict_raises(base, override):
    with pytest.raises(ConfigTypeConflictError):
        deep_merge(base, override)


def test_merge_requires_dict_roots():
    with pytest.raises(ConfigTypeConflictError):
        deep_merge({"a": 1}, ["not", "a", "dict"])
