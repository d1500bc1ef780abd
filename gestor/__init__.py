"""
Gestor de Contactos: planilla / vCard contact reconciliation.
"""
