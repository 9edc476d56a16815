"""
Importador de Propriedades HubSpot - Arquivo Principal

Cria propriedades personalizadas no HubSpot (contatos, negócios e tickets)
a partir de um arquivo CSV e gera um relatório PDF com o resultado de cada linha.

MODOS DE USO:
==============

1. PRINCIPAL:
   python main.py                              # Importa propriedades.csv
   python main.py --csv-file minhas_props.csv  # CSV específico
   python main.py --excel                      # Também exporta os resultados em Excel

2. UTILITÁRIOS:
   python main.py --config-test                # Testar configurações e token
   python main.py --listar-propriedades deal   # Listar propriedades existentes

ARQUIVOS NECESSÁRIOS:
- CSV com colunas: objectType, name, label, description, groupName, type, fieldType, options
- Token do Private App: HUBSPOT_API_KEY no arquivo .env
"""

import argparse

from hubspot_importer.config import active_config
from hubspot_importer.excel_export import ResultExcelExporter
from hubspot_importer.hubspot_client import HubSpotClient
from hubspot_importer.object_types import ObjectType
from hubspot_importer.pdf_report import PdfReportWriter
from hubspot_importer.property_importer import PropertyImporter

# Configurar logging com arquivo de log com timestamp
logger = active_config.setup_logging('importar_propriedades')

def main():
    """
    Função principal do sistema
    """
    print("🚀 " + "="*70)
    print("   IMPORTADOR DE PROPRIEDADES HUBSPOT")
    print("="*73)

    parser = argparse.ArgumentParser(
        description='Importador de Propriedades HubSpot a partir de CSV',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
EXEMPLOS DE USO:
  python main.py                               # Importar propriedades.csv
  python main.py --csv-file props.csv --excel  # CSV específico + planilha de resultados
  python main.py --config-test                 # Testar configurações
  python main.py --listar-propriedades contact # Listar propriedades de contatos
        """
    )

    parser.add_argument('--csv-file', default=active_config.CSV_INPUT_FILE,
                        help=f'Arquivo CSV de propriedades (padrão: {active_config.CSV_INPUT_FILE})')
    parser.add_argument('--excel', action='store_true',
                        help='Exportar também os resultados para Excel')
    parser.add_argument('--max-workers', type=int,
                        help=f'Envios simultâneos (padrão: {active_config.MAX_CONCURRENT_REQUESTS})')
    parser.add_argument('--output-dir', help='Pasta do relatório PDF')

    parser.add_argument('--config-test', action='store_true', help='Testar configurações do sistema')
    parser.add_argument('--listar-propriedades', choices=[t.value for t in ObjectType],
                        help='Listar propriedades existentes de um tipo de objeto')

    args = parser.parse_args()

    try:
        if args.config_test:
            test_configuration()
        elif args.listar_propriedades:
            from utils.listar_propriedades import listar_propriedades
            listar_propriedades(ObjectType(args.listar_propriedades))
        else:
            processo_importacao(args.csv_file, args.excel, args.max_workers, args.output_dir)
    except KeyboardInterrupt:
        print("\n⏹️  Processamento interrompido pelo usuário")
    except Exception as e:
        logger.error(f"❌ Erro inesperado: {e}")
        print(f"\n❌ Erro inesperado: {e}")

    print("\n" + "="*73)
    print("🏁 Execução finalizada!")
    print("="*73)

def test_configuration():
    """
    Testa configurações do sistema
    """
    logger.info("=== TESTE DE CONFIGURAÇÃO ===")

    if not active_config.validate_config():
        logger.error("❌ Token do HubSpot não configurado")
        return False

    for object_type in ObjectType:
        logger.info(f"✅ Endpoint {object_type.value}: {active_config.get_properties_url(object_type)}")

    try:
        hubspot = HubSpotClient()
        if not hubspot.test_connection():
            logger.error("❌ Falha na conexão com HubSpot")
            return False
    except Exception as e:
        logger.error(f"❌ Erro na conexão: {e}")
        return False

    logger.info("✅ Todas as configurações estão corretas!")
    return True

def processo_importacao(csv_file, exportar_excel=False, max_workers=None, output_dir=None):
    """
    Processo principal: CSV → HubSpot → relatório PDF
    """
    logger.info("=== IMPORTAÇÃO DE PROPRIEDADES ===")

    if not active_config.validate_config():
        logger.error("❌ Configure HUBSPOT_API_KEY no arquivo .env")
        return None

    logger.info(f"📄 Arquivo CSV: {csv_file}")

    importer = PropertyImporter(
        report_writer=PdfReportWriter(output_folder=output_dir),
        excel_exporter=ResultExcelExporter() if exportar_excel else None,
        max_concurrent_requests=max_workers
    )
    summary = importer.import_csv(csv_file)

    logger.info("✅ Processo de importação finalizado!")
    logger.info(f"Resumo:\n{importer.get_processing_summary()}")
    return summary

if __name__ == "__main__":
    main()
