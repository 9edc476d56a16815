"""
Importação de propriedades HubSpot a partir de CSV
Cada linha é validada, convertida e enviada de forma independente;
o relatório só é gerado depois que todos os envios terminam
"""
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, List, Optional, Any

from hubspot_importer.config import active_config
from hubspot_importer.excel_export import ResultExcelExporter
from hubspot_importer.file_processor import CSVPropertyReader
from hubspot_importer.hubspot_client import HubSpotClient
from hubspot_importer.models import (
    NOT_AVAILABLE, ImportState, ImportSummary, ResultRecord, ResultStatus
)
from hubspot_importer.object_types import ObjectType, parse_object_type
from hubspot_importer.pdf_report import PdfReportWriter
from hubspot_importer.property_mapper import build_property_definition, invalid_object_result

logger = logging.getLogger(__name__)

class PropertyImporter:
    """Processa o CSV, envia as propriedades e gera os relatórios"""

    def __init__(self, hubspot_client: HubSpotClient = None,
                 reader: CSVPropertyReader = None,
                 report_writer: PdfReportWriter = None,
                 excel_exporter: ResultExcelExporter = None,
                 max_concurrent_requests: int = None):

        self.hubspot = hubspot_client or HubSpotClient()
        self.reader = reader or CSVPropertyReader()
        self.report_writer = report_writer or PdfReportWriter()
        self.excel_exporter = excel_exporter

        self.max_concurrent_requests = max_concurrent_requests or active_config.MAX_CONCURRENT_REQUESTS

        self.summary: Optional[ImportSummary] = None

    def import_csv(self, csv_path: str) -> ImportSummary:
        """
        Processa o arquivo CSV completo e gera o relatório PDF

        Args:
            csv_path: Caminho do CSV de propriedades

        Returns:
            ImportSummary com os resultados ordenados pela linha do CSV
        """
        logger.info(f"Iniciando importação de propriedades: {csv_path}")
        self.summary = ImportSummary(csv_path=csv_path)

        results: List[ResultRecord] = []
        critical_error: Optional[ResultRecord] = None

        with ThreadPoolExecutor(max_workers=self.max_concurrent_requests) as executor:
            futures = {}
            try:
                for row_number, row in self.reader.iter_rows(csv_path):
                    self.summary.rows_processed += 1

                    object_type = parse_object_type(row.get('objectType'))
                    if object_type is None:
                        results.append(invalid_object_result(row, row_number))
                        continue

                    definition = build_property_definition(row)
                    future = executor.submit(self._submit_property, row_number, object_type, definition)
                    futures[future] = row_number
            except Exception as e:
                logger.error(f"❌ Erro na leitura do CSV: {e}")
                critical_error = self._critical_error_result(e)

            # Aguardar todos os envios antes do relatório
            for future in as_completed(futures):
                results.append(future.result())

        results.sort(key=lambda result: result.row_number)
        if critical_error is not None:
            results.append(critical_error)
            self.summary.state = ImportState.CRITICAL_ERROR
        else:
            self.summary.state = ImportState.DONE
            logger.info("✅ Importação finalizada!")

        self.summary.results = results
        self._log_final_stats()

        self.summary.report_path = self.report_writer.generate(results)
        self.summary.state = ImportState.REPORT_GENERATED

        if self.excel_exporter is not None and results:
            try:
                self.summary.excel_path = self.excel_exporter.export_results(results)
            except Exception as e:
                logger.error(f"Erro ao exportar resultados para Excel: {e}")

        return self.summary

    def _submit_property(self, row_number: int, object_type: ObjectType,
                         definition: Dict[str, Any]) -> ResultRecord:
        """
        Envia uma propriedade e registra o resultado

        Nunca propaga exceções: sempre devolve exatamente um ResultRecord.
        """
        name = definition.get('name') or NOT_AVAILABLE
        label = definition.get('label') or NOT_AVAILABLE

        try:
            response = self.hubspot.create_property(object_type, definition)
        except Exception as e:
            logger.exception(f"❌ Erro inesperado ({name} - {object_type.value})")
            response = {'success': False, 'error': str(e)}

        if response.get('success'):
            logger.info(f"✅ Criado: {name} ({object_type.value})")
            return ResultRecord(
                row_number=row_number,
                object_type=object_type.value,
                name=name,
                label=label,
                status=ResultStatus.SUCCESS
            )

        error_message = response.get('error') or 'Erro desconhecido'
        logger.error(f"❌ Erro ({name} - {object_type.value}): {error_message}")
        return ResultRecord(
            row_number=row_number,
            object_type=object_type.value,
            name=name,
            label=label,
            status=ResultStatus.FAILURE,
            error_message=error_message
        )

    def _critical_error_result(self, error: Exception) -> ResultRecord:
        return ResultRecord(
            row_number=self.summary.rows_processed + 1,
            object_type=NOT_AVAILABLE,
            name='Erro de Leitura CSV',
            label=NOT_AVAILABLE,
            status=ResultStatus.CRITICAL_ERROR,
            error_message=f"Erro ao ler o arquivo CSV: {str(error).strip()}"
        )

    def _log_final_stats(self):
        """Log das estatísticas finais do processamento"""
        logger.info("=== ESTATÍSTICAS FINAIS ===")
        logger.info(f"Linhas processadas: {self.summary.rows_processed}")
        for status in ResultStatus:
            logger.info(f"{status.label}: {self.summary.count(status)}")

        errors = [r for r in self.summary.results if r.status is not ResultStatus.SUCCESS]
        if errors:
            logger.warning("ERROS ENCONTRADOS:")
            for result in errors[:5]:  # Mostrar apenas os primeiros 5
                logger.warning(f"  - {result.name} ({result.object_type}): {result.status.label}")

    def get_processing_summary(self) -> str:
        """
        Retorna resumo do processamento em formato texto
        """
        if self.summary is None:
            return "Nenhuma importação executada"

        summary = []
        summary.append("=== RESUMO DA IMPORTAÇÃO ===")
        summary.append(f"📄 Arquivo: {self.summary.csv_path}")
        summary.append(f"📋 Linhas processadas: {self.summary.rows_processed}")
        summary.append(f"✅ Propriedades criadas: {self.summary.count(ResultStatus.SUCCESS)}")
        summary.append(f"❌ Falhas no envio: {self.summary.count(ResultStatus.FAILURE)}")
        summary.append(f"⚠️  Linhas ignoradas: {self.summary.count(ResultStatus.INVALID_OBJECT)}")
        if self.summary.has_critical_error:
            summary.append("❌ Erro crítico na leitura do CSV")
        if self.summary.report_path:
            summary.append(f"📄 Relatório PDF: {self.summary.report_path}")
        if self.summary.excel_path:
            summary.append(f"📊 Planilha Excel: {self.summary.excel_path}")

        return "\n".join(summary)
