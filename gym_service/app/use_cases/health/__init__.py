from .get_tips_use_case import GetTipsUseCase, build_tips
from .list_health_metrics_use_case import ListHealthMetricsUseCase
from .record_health_metric_use_case import RecordHealthMetricUseCase
from .dtos import (
    HealthMetricListResponse,
    HealthMetricResponse,
    RecordHealthMetricCommand,
    TipsResponse,
)

__all__ = [
    "GetTipsUseCase",
    "ListHealthMetricsUseCase",
    "RecordHealthMetricUseCase",
    "build_tips",
    "HealthMetricListResponse",
    "HealthMetricResponse",
    "RecordHealthMetricCommand",
    "TipsResponse",
]
