"""
Exportação dos resultados da importação para planilha Excel
"""
import pandas as pd
import logging
from datetime import datetime
from typing import List
import os

from hubspot_importer.config import active_config
from hubspot_importer.models import ResultRecord, ResultStatus

logger = logging.getLogger(__name__)

class ResultExcelExporter:
    """Exporta os resultados da importação para Excel"""

    def __init__(self, output_folder: str = None):
        self.output_folder = output_folder or active_config.EXCEL_OUTPUT_FOLDER
        self._ensure_output_folder()

    def _ensure_output_folder(self):
        """Cria pasta de saída se não existir"""
        if not os.path.exists(self.output_folder):
            os.makedirs(self.output_folder, exist_ok=True)

    def export_results(self, results: List[ResultRecord], filename: str = None) -> str:
        """
        Exporta os resultados para planilha

        Args:
            results: Resultados da importação
            filename: Nome do arquivo (opcional)

        Returns:
            Caminho do arquivo gerado
        """
        if not results:
            raise ValueError("Nenhum resultado fornecido para exportação")

        logger.info(f"Iniciando exportação de {len(results)} resultados para Excel")

        # Gerar nome do arquivo se não fornecido
        if not filename:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            filename = f"resultado_importacao_propriedades_{timestamp}.xlsx"

        # Garantir extensão .xlsx
        if not filename.endswith('.xlsx'):
            filename += '.xlsx'

        filepath = os.path.join(self.output_folder, filename)

        try:
            df = pd.DataFrame([result.to_dict() for result in results])
            resumo_df = self._create_resumo_dataframe(results)

            with pd.ExcelWriter(filepath, engine='openpyxl') as writer:
                df.to_excel(writer, sheet_name='Resultados', index=False)
                resumo_df.to_excel(writer, sheet_name='Resumo', index=False)

                self._apply_excel_formatting(writer)

            logger.info(f"Arquivo Excel gerado com sucesso: {filepath}")
            return filepath

        except Exception as e:
            logger.error(f"Erro ao gerar arquivo Excel: {e}")
            raise

    def _create_resumo_dataframe(self, results: List[ResultRecord]) -> pd.DataFrame:
        """Cria DataFrame com a contagem por status"""
        resumo = []
        for status in ResultStatus:
            resumo.append({
                'Status': status.label,
                'Quantidade': sum(1 for result in results if result.status is status)
            })
        resumo.append({'Status': 'Total', 'Quantidade': len(results)})
        return pd.DataFrame(resumo)

    def _apply_excel_formatting(self, writer):
        """Aplica formatação ao arquivo Excel"""
        from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
        from openpyxl.utils import get_column_letter

        header_fill = PatternFill(start_color='366092', end_color='366092', fill_type='solid')
        header_font = Font(color='FFFFFF', bold=True)

        thin_border = Border(
            left=Side(style='thin'),
            right=Side(style='thin'),
            top=Side(style='thin'),
            bottom=Side(style='thin')
        )

        status_fills = {
            status.label: PatternFill(start_color=color, end_color=color, fill_type='solid')
            for status, color in (
                (ResultStatus.SUCCESS, 'C6EFCE'),
                (ResultStatus.FAILURE, 'FFC7CE'),
                (ResultStatus.INVALID_OBJECT, 'FFEB9C'),
                (ResultStatus.CRITICAL_ERROR, 'FFC7CE'),
            )
        }

        for sheet_name in writer.sheets:
            worksheet = writer.sheets[sheet_name]

            for cell in worksheet[1]:
                cell.font = header_font
                cell.fill = header_fill
                cell.alignment = Alignment(horizontal='center', vertical='center')
                cell.border = thin_border

            # Auto-ajustar largura das colunas
            for column in worksheet.columns:
                column_letter = get_column_letter(column[0].column)
                max_length = max(len(str(cell.value)) for cell in column if cell.value is not None)
                worksheet.column_dimensions[column_letter].width = min(max_length + 2, 50)  # Limitar a 50 caracteres

            for row in worksheet.iter_rows(min_row=2, max_row=worksheet.max_row):
                for cell in row:
                    if cell.value is None:
                        continue
                    cell.border = thin_border
                    if cell.value in status_fills:
                        cell.fill = status_fills[cell.value]

            # Congelar primeira linha
            worksheet.freeze_panes = 'A2'
