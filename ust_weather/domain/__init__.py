"""Domain Layer - entidades, regras de alerta e agregadores (sem I/O)"""
