"""
Modelos de resultado da importação de propriedades
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M:%S"
NOT_AVAILABLE = 'N/A'


class ResultStatus(Enum):
    SUCCESS = ('✅ Sucesso', 'green')
    FAILURE = ('❌ Falha', 'red')
    INVALID_OBJECT = ('⚠️ Objeto Inválido / Linha Ignorada', 'orange')
    CRITICAL_ERROR = ('❌ Erro Crítico', 'red')

    def __init__(self, label: str, color: str):
        self.label = label
        self.color = color

    @property
    def text(self) -> str:
        """Label sem o emoji, para fontes que não o suportam (PDF)"""
        return self.label.split(' ', 1)[1]


class ImportState(Enum):
    STREAMING = 'streaming'
    DONE = 'done'
    CRITICAL_ERROR = 'critical_error'
    REPORT_GENERATED = 'report_generated'


def now_timestamp() -> str:
    """Data e hora local no formato usado nos relatórios"""
    return datetime.now().strftime(TIMESTAMP_FORMAT)


@dataclass(frozen=True)
class ResultRecord:
    """Resultado de uma tentativa de criação de propriedade"""
    row_number: int
    object_type: str
    name: str
    label: str
    status: ResultStatus
    error_message: str = ''
    timestamp: str = field(default_factory=now_timestamp)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'Linha': self.row_number,
            'Objeto': self.object_type,
            'Nome Interno': self.name,
            'Label': self.label,
            'Status': self.status.label,
            'Mensagem de Erro': self.error_message,
            'Hora': self.timestamp,
        }


@dataclass
class ImportSummary:
    """Resultados acumulados de uma execução"""
    csv_path: str
    results: List[ResultRecord] = field(default_factory=list)
    rows_processed: int = 0
    state: ImportState = ImportState.STREAMING
    report_path: Optional[str] = None
    excel_path: Optional[str] = None

    def count(self, status: ResultStatus) -> int:
        return sum(1 for result in self.results if result.status is status)

    @property
    def has_critical_error(self) -> bool:
        return any(r.status is ResultStatus.CRITICAL_ERROR for r in self.results)
