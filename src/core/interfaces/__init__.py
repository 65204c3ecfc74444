"""Contratos que el pipeline espera de sus adaptadores.

Hoy solo `JSONFetcher`: el orquestador lo recibe por parámetro, así los tests
usan un stub y la CLI el cliente httpx real.
"""
