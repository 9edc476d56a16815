"""
Relatório em PDF dos resultados da importação de propriedades
"""
import logging
import os
from datetime import datetime
from typing import List
from xml.sax.saxutils import escape

from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.platypus import KeepTogether, Paragraph, SimpleDocTemplate, Spacer

from hubspot_importer.config import active_config
from hubspot_importer.models import ResultRecord, now_timestamp

logger = logging.getLogger(__name__)

REPORT_TITLE = 'Relatório de Importação de Propriedades HubSpot'
EMPTY_REPORT_MESSAGE = 'Nenhuma propriedade foi processada a partir do CSV.'


def report_filename(moment: datetime = None) -> str:
    """Nome do arquivo com timestamp ISO ('2024-05-01T10-20-30_123456')"""
    moment = moment or datetime.now()
    timestamp = moment.isoformat(timespec='microseconds').replace(':', '-').replace('.', '_')
    return f"relatorio_importacao_propriedades_{timestamp}.pdf"


class PdfReportWriter:
    """Gera o relatório PDF a partir dos resultados"""

    def __init__(self, output_folder: str = None):
        self.output_folder = output_folder or active_config.REPORT_OUTPUT_FOLDER
        self._ensure_output_folder()

        styles = getSampleStyleSheet()
        self.title_style = ParagraphStyle('ReportTitle', parent=styles['Title'], fontSize=18)
        self.header_style = ParagraphStyle('ReportHeader', parent=styles['Normal'], fontSize=10)
        self.body_style = ParagraphStyle('ReportBody', parent=styles['Normal'], fontSize=11, leading=14)
        self.empty_style = ParagraphStyle('ReportEmpty', parent=styles['Normal'], fontSize=12, alignment=TA_CENTER)

    def _ensure_output_folder(self):
        """Cria pasta de saída se não existir"""
        if not os.path.exists(self.output_folder):
            os.makedirs(self.output_folder, exist_ok=True)

    def generate(self, results: List[ResultRecord]) -> str:
        """
        Gera o relatório PDF

        Args:
            results: Resultados na ordem em que devem aparecer

        Returns:
            Caminho do arquivo gerado
        """
        filepath = os.path.join(self.output_folder, report_filename())

        doc = SimpleDocTemplate(
            filepath,
            pagesize=A4,
            title=REPORT_TITLE,
            leftMargin=2 * cm,
            rightMargin=2 * cm,
            topMargin=2 * cm,
            bottomMargin=2 * cm
        )
        doc.build(self.build_story(results))

        logger.info(f"📄 Relatório em PDF gerado: {filepath}")
        return filepath

    def build_story(self, results: List[ResultRecord]) -> list:
        """Monta os elementos do documento (o reportlab cuida da paginação)"""
        story = [
            Paragraph(REPORT_TITLE, self.title_style),
            Paragraph(f"Data da Execução: {now_timestamp()}", self.header_style),
            Spacer(1, 0.6 * cm),
        ]

        if not results:
            story.append(Paragraph(EMPTY_REPORT_MESSAGE, self.empty_style))
            return story

        for result in results:
            story.append(KeepTogether(self._result_block(result)))
            story.append(Spacer(1, 0.4 * cm))

        return story

    def _result_block(self, result: ResultRecord) -> list:
        lines = [
            f"Objeto: {escape(result.object_type)}",
            f"Nome Interno: {escape(result.name)}",
            f"Label: {escape(result.label)}",
            f'Status: <font color="{result.status.color}">{escape(result.status.text)}</font>',
        ]
        if result.error_message:
            message = escape(result.error_message).replace('\n', '<br/>')
            lines.append(f"Mensagem de Erro: {message}")
        lines.append(f"Hora: {escape(result.timestamp)}")

        return [Paragraph(line, self.body_style) for line in lines]
