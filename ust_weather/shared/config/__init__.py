"""Configurações compartilhadas (settings e logging)"""
