"""
Asignación de eventos a aulas y franjas horarias con un algoritmo genético.
"""
