"""Domain types shared by services and routes."""

from typing import Any

# Opaque record as returned by the open-data API; shape depends on $select
ContractRecord = dict[str, Any]

# Whatever JSON the model produced, or an error marker dict
AnalysisResult = Any
