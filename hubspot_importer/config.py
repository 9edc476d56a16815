"""
Configurações do importador de propriedades HubSpot
"""
import os
from dotenv import load_dotenv

from hubspot_importer.object_types import ObjectType

# Carregar variáveis do arquivo .env
load_dotenv()

class Config:
    # Token do Private App do HubSpot (obrigatório)
    HUBSPOT_API_KEY = os.getenv('HUBSPOT_API_KEY', '')

    # Endpoints da API de propriedades por tipo de objeto
    # Contatos e negócios usam a API v1, tickets a API v3
    HUBSPOT_CONTACT_PROPERTIES_URL = os.getenv(
        'HUBSPOT_CONTACT_PROPERTIES_URL',
        'https://api.hubapi.com/properties/v1/contacts/properties'
    )
    HUBSPOT_DEAL_PROPERTIES_URL = os.getenv(
        'HUBSPOT_DEAL_PROPERTIES_URL',
        'https://api.hubspot.com/properties/v1/deals/properties'
    )
    HUBSPOT_TICKET_PROPERTIES_URL = os.getenv(
        'HUBSPOT_TICKET_PROPERTIES_URL',
        'https://api.hubspot.com/crm/v3/properties/tickets'
    )

    # Configurações de arquivos
    CSV_INPUT_FILE = os.getenv('CSV_INPUT_FILE', 'propriedades.csv')
    REPORT_OUTPUT_FOLDER = os.getenv('REPORT_OUTPUT_FOLDER', '.')
    EXCEL_OUTPUT_FOLDER = os.getenv('EXCEL_OUTPUT_FOLDER', './output/excel_export')

    # Configurações de log
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOGS_FOLDER = './logs'

    # Configurações de processamento
    CHUNK_SIZE = 100  # Linhas do CSV lidas por vez
    MAX_CONCURRENT_REQUESTS = int(os.getenv('MAX_CONCURRENT_REQUESTS', '5'))
    REQUEST_TIMEOUT = float(os.getenv('REQUEST_TIMEOUT', '30'))

    @classmethod
    def setup_logging(cls, script_name: str = 'hubspot_importer'):
        """
        Configura o sistema de logging com arquivo de log com timestamp

        Args:
            script_name: Nome do script para identificar o log
        """
        import logging
        from datetime import datetime

        # Criar pasta logs se não existir
        os.makedirs(cls.LOGS_FOLDER, exist_ok=True)

        # Gerar nome do arquivo com timestamp
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_filename = f"{script_name}_{timestamp}.log"
        log_filepath = os.path.join(cls.LOGS_FOLDER, log_filename)

        logging.basicConfig(
            level=getattr(logging, cls.LOG_LEVEL.upper(), logging.INFO),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            handlers=[
                logging.FileHandler(log_filepath, encoding='utf-8'),
                logging.StreamHandler()  # Também mostra no console
            ]
        )
        # ParserWarning do pandas (linhas com campos a mais) vai para o log
        logging.captureWarnings(True)

        logger = logging.getLogger(__name__)
        logger.info("=== INICIANDO IMPORTADOR HUBSPOT ===")
        logger.info(f"Arquivo de log: {log_filepath}")
        logger.info(f"Nível de log: {cls.LOG_LEVEL}")

        return logger

    @classmethod
    def get_properties_url(cls, object_type: ObjectType) -> str:
        """
        Retorna o endpoint de propriedades do tipo de objeto

        Args:
            object_type: Tipo de objeto do HubSpot

        Returns:
            URL do endpoint
        """
        if object_type is ObjectType.CONTACT:
            return cls.HUBSPOT_CONTACT_PROPERTIES_URL
        elif object_type is ObjectType.DEAL:
            return cls.HUBSPOT_DEAL_PROPERTIES_URL
        elif object_type is ObjectType.TICKET:
            return cls.HUBSPOT_TICKET_PROPERTIES_URL
        raise ValueError(f"Tipo de objeto sem endpoint configurado: {object_type}")

    @classmethod
    def validate_config(cls) -> bool:
        """Valida se as configurações obrigatórias estão definidas"""
        if not cls.HUBSPOT_API_KEY:
            print("ERRO: HUBSPOT_API_KEY não está definido!")
            return False

        if cls.MAX_CONCURRENT_REQUESTS < 1:
            print(f"ERRO: MAX_CONCURRENT_REQUESTS inválido: {cls.MAX_CONCURRENT_REQUESTS}")
            return False

        return True

# Configurações específicas por ambiente
class DevelopmentConfig(Config):
    DEBUG = True

class ProductionConfig(Config):
    DEBUG = False

# Configuração ativa (alterar conforme ambiente)
active_config = DevelopmentConfig()
