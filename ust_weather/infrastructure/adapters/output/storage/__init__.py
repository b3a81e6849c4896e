"""Adapters de storage persistente chave/valor"""
