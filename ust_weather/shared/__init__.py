"""Shared Layer - utilitários e configuração comuns a todas as camadas"""
