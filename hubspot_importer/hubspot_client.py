"""
Cliente para a API de propriedades do HubSpot
Autenticação via Bearer Token de Private App
"""
import json
import logging
from typing import Dict, List, Optional, Any

import requests

from hubspot_importer.config import active_config
from hubspot_importer.object_types import ObjectType

logger = logging.getLogger(__name__)


def extract_error_message(response: Optional[requests.Response], error: Exception) -> str:
    """
    Extrai a mensagem de erro mais útil de uma falha

    Usa o corpo da resposta quando existe (JSON formatado com indentação),
    senão o texto da exceção.
    """
    if response is not None and response.content:
        try:
            return json.dumps(response.json(), indent=2, ensure_ascii=False)
        except ValueError:
            return response.text
    return str(error)


class HubSpotClient:
    def __init__(self, api_token: str = None, timeout: float = None):
        self.api_token = api_token if api_token is not None else active_config.HUBSPOT_API_KEY
        self.timeout = timeout if timeout is not None else active_config.REQUEST_TIMEOUT

        if not self.api_token:
            raise ValueError("HUBSPOT_API_KEY não configurado")

    def _headers(self) -> Dict[str, str]:
        return {
            'Content-Type': 'application/json',
            'Authorization': f'Bearer {self.api_token}'
        }

    def _make_request(self, method: str, url: str, data: Dict = None) -> Dict:
        """
        Faz requisição para a API do HubSpot

        Returns:
            {'success': True, 'data': ..., 'status_code': ...} em respostas 2xx,
            {'success': False, 'error': ..., 'status_code': ...} nos demais casos
        """
        response = None
        try:
            if method == 'GET':
                response = requests.get(url, headers=self._headers(), timeout=self.timeout)
            elif method == 'POST':
                response = requests.post(url, json=data, headers=self._headers(), timeout=self.timeout)
            else:
                raise ValueError(f"Método HTTP não suportado: {method}")

            response.raise_for_status()

        except requests.exceptions.RequestException as e:
            # HTTPError traz a resposta; erros de conexão/timeout não
            error_response = e.response if e.response is not None else response
            error_message = extract_error_message(error_response, e)
            status_code = error_response.status_code if error_response is not None else None
            logger.error(f"Erro na requisição {method} {url}: {error_message}")
            return {'success': False, 'error': error_message, 'status_code': status_code}

        try:
            payload = response.json()
        except ValueError:
            # Resposta não é JSON válido, mas status é de sucesso
            logger.warning(f"Resposta não-JSON para {method} {url}: {response.text}")
            payload = None

        return {'success': True, 'data': payload, 'status_code': response.status_code}

    def create_property(self, object_type: ObjectType, definition: Dict[str, Any]) -> Dict:
        """
        Cria uma propriedade personalizada no tipo de objeto informado

        Args:
            object_type: Tipo de objeto (contact, deal, ticket)
            definition: Definição da propriedade (corpo JSON)
        """
        url = active_config.get_properties_url(object_type)
        logger.debug(f"Criando propriedade {definition.get('name')} em {url}")
        return self._make_request('POST', url, data=definition)

    def list_properties(self, object_type: ObjectType) -> List[Dict]:
        """
        Lista as propriedades existentes de um tipo de objeto

        A API v1 devolve uma lista, a v3 um objeto com 'results'.
        """
        url = active_config.get_properties_url(object_type)
        result = self._make_request('GET', url)

        if not result.get('success'):
            logger.error(f"Erro ao listar propriedades de {object_type.value}: {result.get('error')}")
            return []

        data = result.get('data') or []
        if isinstance(data, dict):
            data = data.get('results', [])
        return data

    def test_connection(self) -> bool:
        """Testa conexão e token consultando as propriedades de contatos"""
        logger.info("Testando conexão com HubSpot...")

        url = active_config.get_properties_url(ObjectType.CONTACT)
        result = self._make_request('GET', url)

        if result.get('success'):
            logger.info("✅ Conexão com HubSpot estabelecida")
            return True

        logger.error(f"Falha na conexão: {result.get('error', 'Erro desconhecido')}")
        return False
