"""Minimal HTML screen for the dashboard."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["ui"])


@router.get("/ui", response_class=HTMLResponse)
async def dashboard_ui() -> HTMLResponse:
    """Minimal dashboard that consumes the statistics API."""
    return HTMLResponse(_DASHBOARD_HTML)


_DASHBOARD_HTML = """<!doctype html>
<html lang="es">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>FIDO - Estadísticas de Alimentación</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      h1 { margin-bottom: 0.5rem; color: #2c3e50; }
      .row { margin-bottom: 1rem; }
      input, select { padding: 0.4rem 0.6rem; }
      button { padding: 0.4rem 0.8rem; margin-right: 0.5rem; }
      img { max-width: 800px; display: block; margin-top: 1rem; }
      pre { background: #f6f6f6; padding: 1rem; overflow: auto; }
    </style>
  </head>
  <body>
    <h1>Estadísticas de Alimentación</h1>
    <div class="row">
      <label>Token de sesión</label><br />
      <input id="token" type="password" placeholder="Bearer token" size="40" />
    </div>
    <div class="row">
      <select id="mode">
        <option value="week">Por semana</option>
        <option value="range">Por rango de fechas</option>
      </select>
      <input id="week" type="week" />
      <input id="start" type="date" />
      <input id="end" type="date" />
      <select id="chart">
        <option value="bar">Barras</option>
        <option value="line">Líneas</option>
        <option value="pie">Circular</option>
        <option value="area">Área</option>
      </select>
    </div>
    <div class="row">
      <button onclick="query()">Consultar</button>
      <button onclick="sample()">Datos de prueba</button>
      <button onclick="chart()">Gráfica</button>
      <button onclick="pdf()">Descargar PDF</button>
    </div>
    <pre id="output">Listo.</pre>
    <img id="chart-image" alt="" />
    <script>
      let report = null;

      function headers() {
        const token = document.getElementById('token').value;
        return {
          'Authorization': 'Bearer ' + token,
          'Content-Type': 'application/json'
        };
      }

      function show(data) {
        document.getElementById('output').textContent =
          JSON.stringify(data, null, 2);
      }

      async function query() {
        const params = new URLSearchParams({
          mode: document.getElementById('mode').value,
          iso_week: document.getElementById('week').value,
          start_date: document.getElementById('start').value,
          end_date: document.getElementById('end').value
        });
        const res = await fetch('/stats?' + params, { headers: headers() });
        const data = await res.json();
        report = res.ok ? data : data.report || null;
        show(data);
        if (report) { await chart(); }
      }

      async function sample() {
        const res = await fetch('/stats/sample', {
          method: 'POST', headers: headers()
        });
        report = await res.json();
        show(report);
        await chart();
      }

      async function chart() {
        if (!report) { return; }
        const res = await fetch('/stats/chart', {
          method: 'POST',
          headers: headers(),
          body: JSON.stringify({
            series: report.series,
            chart_type: document.getElementById('chart').value
          })
        });
        if (!res.ok) { show(await res.json()); return; }
        const blob = await res.blob();
        document.getElementById('chart-image').src = URL.createObjectURL(blob);
      }

      async function pdf() {
        const res = await fetch('/stats/pdf', {
          method: 'POST',
          headers: headers(),
          body: JSON.stringify(report || {})
        });
        if (!res.ok) { show(await res.json()); return; }
        const disposition = res.headers.get('Content-Disposition') || '';
        const match = disposition.match(/filename="(.+)"/);
        const link = document.createElement('a');
        link.href = URL.createObjectURL(await res.blob());
        link.download = match ? match[1] : 'reporte-alimentacion.pdf';
        link.click();
      }
    </script>
  </body>
</html>
"""
