"""Constantes HTTP pour éviter les valeurs magiques dans le code.

Ce module définit les bornes de statut et les en-têtes utilisés par le client du backend
astrologique.
"""

# Plage des statuts de succès (2xx)
HTTP_STATUS_SUCCESS_MIN = 200
HTTP_STATUS_SUCCESS_MAX = 300

# Codes de statut HTTP courants (tests et journaux)
HTTP_UNAUTHORIZED = 401
HTTP_INTERNAL_SERVER_ERROR = 500

# En-têtes
CONTENT_TYPE_JSON = "application/json"

# Endpoints du backend astrologique
NATAL_CHART_ENDPOINT = "/v1/natal-chart"
