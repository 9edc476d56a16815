"""
Leitura do arquivo CSV de propriedades
"""
import logging
from typing import Dict, Iterator, List, Tuple

import pandas as pd

from hubspot_importer.config import active_config

logger = logging.getLogger(__name__)

EXPECTED_COLUMNS = [
    'objectType', 'name', 'label', 'description',
    'groupName', 'type', 'fieldType', 'options'
]

class CSVPropertyReader:
    """Lê o CSV de propriedades em blocos, linha a linha"""

    def __init__(self, chunk_size: int = None, encoding: str = 'utf-8-sig'):
        self.chunk_size = chunk_size or active_config.CHUNK_SIZE
        self.encoding = encoding

    def iter_rows(self, csv_path: str) -> Iterator[Tuple[int, Dict[str, str]]]:
        """
        Percorre as linhas do CSV

        Células vazias chegam como '' e colunas ausentes (no cabeçalho ou
        no fim de uma linha curta) simplesmente não aparecem no dict.
        Linhas com campos a mais são mantidas com os primeiros campos, um
        por coluna do cabeçalho (o pandas emite um ParserWarning). Erros de
        leitura (arquivo inexistente, encoding) são propagados para quem
        consome o iterador.

        Yields:
            (número da linha de dados, linha como dict)
        """
        logger.info(f"📄 Lendo arquivo CSV: {csv_path}")

        row_number = 0
        try:
            reader = pd.read_csv(
                csv_path,
                dtype=str,
                keep_default_na=False,
                encoding=self.encoding,
                chunksize=self.chunk_size,
                engine='python',
                index_col=False
            )
        except pd.errors.EmptyDataError:
            logger.warning(f"Arquivo CSV vazio: {csv_path}")
            return

        with reader:
            for chunk in reader:
                chunk.columns = [str(column).strip() for column in chunk.columns]
                if row_number == 0:
                    self._log_missing_columns(list(chunk.columns))

                for row in chunk.to_dict('records'):
                    row_number += 1
                    yield row_number, {key: value for key, value in row.items() if not pd.isna(value)}

        logger.info(f"Leitura do CSV concluída: {row_number} linhas")

    def _log_missing_columns(self, columns: List[str]):
        missing = [column for column in EXPECTED_COLUMNS if column not in columns]
        if missing:
            logger.warning(f"Colunas ausentes no CSV: {', '.join(missing)}")
