# services/html_report.py
import html

from config import SEVERITY_LABELS
from models.schemas import ProjectedDocument

REPORT_CSS = """
    body { font-family: Arial, sans-serif; margin: 40px; }
    h1 { color: #333; border-bottom: 2px solid #667eea; }
    .section { margin: 20px 0; }
    .hallazgo { background: #f8f9fa; padding: 15px; margin: 10px 0; border-left: 4px solid #dc3545; }
    .recomendacion { background: #f8f9fa; padding: 15px; margin: 10px 0; border-left: 4px solid #28a745; }
"""


def render_report_html(doc: ProjectedDocument) -> str:
    e = html.escape

    findings_html = "".join(f"""
        <div class="hallazgo">
          <strong>{e(f.description)}</strong><br>
          <small>Criticidad: {e(SEVERITY_LABELS[f.severity.value])} | Ubicación: {e(f.location)}</small>
        </div>
    """ for f in doc.findings)

    def _recommendation(r) -> str:
        savings = f"<p><small>Ahorro estimado: {e(r.estimated_savings)}</small></p>" if r.estimated_savings else ""
        return f"""
        <div class="recomendacion">
          <strong>{e(r.title)}</strong><br>
          <p>{e(r.description)}</p>
          {savings}
        </div>
    """

    recommendations_html = "".join(_recommendation(r) for r in doc.recommendations)

    return f"""<!DOCTYPE html>
<html lang="es">
<head>
  <meta charset="utf-8">
  <title>Reporte de Auditoría - {e(doc.document_number)}</title>
  <style>{REPORT_CSS}</style>
</head>
<body>
  <h1>Reporte de Auditoría Energética</h1>

  <div class="section">
    <h2>Información General</h2>
    <p><strong>Cliente:</strong> {e(doc.client_name)}</p>
    <p><strong>Fecha de Auditoría:</strong> {e(doc.audit_date)}</p>
    <p><strong>Auditor:</strong> {e(doc.auditor)}</p>
    <p><strong>Tipo de Instalación:</strong> {e(doc.facility_type)}</p>
    <p><strong>Número de Documento:</strong> {e(doc.document_number)}</p>
  </div>

  <div class="section">
    <h2>Resumen Ejecutivo</h2>
    <p>{e(doc.summary)}</p>
  </div>

  <div class="section">
    <h2>Hallazgos ({doc.total_findings})</h2>
    {findings_html}
  </div>

  <div class="section">
    <h2>Recomendaciones ({doc.total_recommendations})</h2>
    {recommendations_html}
  </div>

  <div class="section">
    <p><small>Documento generado el {e(doc.generation_date)} a las {e(doc.generation_time)}</small></p>
  </div>
</body>
</html>
"""
