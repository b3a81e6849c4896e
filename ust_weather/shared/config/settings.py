"""
Configurações centralizadas da aplicação (lidas do ambiente)

Constantes de domínio (janela de frescor, timeouts, coordenadas) NÃO são
configuráveis em runtime e ficam em domain/constants.py
"""
import os
from pathlib import Path

# Storage persistente: 'file' (disco local) ou 'dynamodb'
STORAGE_BACKEND = os.environ.get('STORAGE_BACKEND', 'file').lower()
STORAGE_FILE_PATH = os.environ.get(
    'STORAGE_FILE_PATH',
    str(Path.home() / '.ust_weather' / 'storage.json')
)
STORAGE_TABLE_NAME = os.environ.get('STORAGE_TABLE_NAME', 'ust-weather-storage')

# AWS
AWS_REGION = os.environ.get('AWS_REGION', 'ap-southeast-1')

# CORS
CORS_ORIGIN = os.environ.get('CORS_ORIGIN', '*')
