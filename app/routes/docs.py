"""Landing page documenting the available endpoints."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["docs"])

INDEX_HTML = """<!DOCTYPE html>
<html lang="es">
<head>
  <meta charset="utf-8">
  <title>SECOP Relay</title>
</head>
<body>
  <h1>SECOP Relay</h1>
  <p>Procesos de contratación SECOP II sin adjudicar, con precio base mayor a
  $500.000.000, excluyendo contratación directa, categoría 811015.</p>
  <ul>
    <li><a href="/raw"><code>GET /raw</code></a>: todos los campos.</li>
    <li><a href="/filtered"><code>GET /filtered</code></a>: 20 campos seleccionados.</li>
    <li><a href="/analyzed"><code>GET /analyzed</code></a>: 10 campos, evaluados con IA
    para Double C Designs.</li>
  </ul>
  <p>Parámetro opcional <code>fecha=YYYY-MM-DD</code>: fecha de publicación desde la cual
  buscar. Por defecto se usa el día hábil anterior.</p>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse)
def index():
    """Endpoint documentation page."""
    return INDEX_HTML
