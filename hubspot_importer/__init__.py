"""
Pacote principal do Importador de Propriedades HubSpot

Contém os módulos principais do sistema:
- property_importer: Orquestração da importação
- property_mapper: Conversão das linhas do CSV em propriedades
- hubspot_client: Cliente da API de propriedades do HubSpot
- file_processor: Leitura do arquivo CSV
- pdf_report / excel_export: Relatórios de resultado
- config: Configurações do sistema
"""

__version__ = "1.0.0"
__author__ = "Importador de Propriedades HubSpot"
__description__ = "Criação em lote de propriedades personalizadas no HubSpot a partir de CSV"
