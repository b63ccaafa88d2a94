"""Landing page with forms for the public endpoints."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["landing"])


@router.get("/", response_class=HTMLResponse)
async def landing_page() -> HTMLResponse:
    """Static landing page for manual testing."""
    return HTMLResponse(_LANDING_HTML)


_LANDING_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Exercise Tracker</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      h1 { margin-bottom: 0.5rem; }
      form { margin-bottom: 1.5rem; }
      input { display: block; padding: 0.4rem 0.6rem; margin: 0.3rem 0; width: 320px; }
      button { padding: 0.4rem 0.8rem; }
      code { background: #f6f6f6; padding: 0.1rem 0.3rem; }
    </style>
  </head>
  <body>
    <h1>Exercise Tracker</h1>
    <form action="/api/users" method="post">
      <h3>Create a new user</h3>
      <code>POST /api/users</code>
      <input name="username" type="text" placeholder="username" required />
      <button type="submit">Submit</button>
    </form>
    <form id="exercise-form" method="post">
      <h3>Add exercises</h3>
      <code>POST /api/users/:_id/exercises</code>
      <input id="uid" type="text" placeholder=":_id" required />
      <input name="description" type="text" placeholder="description*" required />
      <input name="duration" type="text" placeholder="duration* (mins.)" required />
      <input name="date" type="text" placeholder="date (yyyy-mm-dd)" />
      <button type="submit">Submit</button>
    </form>
    <p>
      <code>GET /api/users/:_id/logs?[from][&amp;to][&amp;limit]</code><br />
      <code>[ ]</code> = optional, <code>from, to</code> = dates (yyyy-mm-dd),
      <code>limit</code> = number
    </p>
    <script>
      const exerciseForm = document.getElementById('exercise-form');
      exerciseForm.addEventListener('submit', () => {
        const userId = document.getElementById('uid').value;
        exerciseForm.action = `/api/users/${userId}/exercises`;
      });
    </script>
  </body>
</html>
"""
