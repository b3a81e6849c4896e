"""
Infrastructure Layer - Clean Architecture
Contém implementações concretas de providers, storage e adapters de entrada
"""
