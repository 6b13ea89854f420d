"""Static HTML documents served by the page routes.

Every page is built once at import time so repeated requests return
byte-identical bodies. Page A carries a small script that drives the
grid API from the browser.
"""

from __future__ import annotations

from bigletters.domain.models import GRID_SIZE

HOME_PAGE = """
<h1 style='text-align: center;'>Welcome to Big Letters!</h1>
<p style='text-align: center;'>
    Check out some big letters:
    <a href='/a'>A</a> |
    <a href='/b'>B</a> |
    <a href='/c'>C</a>
</p>
"""

_LETTER_TEMPLATE = """
<h1 style='font-size: 200px; text-align: center;'>{letter}</h1>
<div style='text-align: center;'>
    <form action='/' method='get'>
        <button type='submit' style='font-size: 24px;'>Go Home</button>
    </form>
</div>
"""

_GRID_WIDGET = """
<div id='grid' style='
    display: grid;
    grid-template-columns: repeat({size}, 20px);
    grid-template-rows: repeat({size}, 20px);
    gap: 2px;
    justify-content: center;
    margin-top: 40px;
'>
</div>
<script>
    async function fetchGrid() {{
        const res = await fetch('/api/grid');
        return await res.json();
    }}
    async function updateCell(idx) {{
        await fetch('/api/cell', {{
            method: 'POST',
            headers: {{'Content-Type': 'application/json'}},
            body: JSON.stringify({{ idx }})
        }});
        renderGrid();
    }}
    async function renderGrid() {{
        const gridDiv = document.getElementById('grid');
        const grid = await fetchGrid();
        gridDiv.innerHTML = '';
        for (let i = 0; i < grid.cells.length; i++) {{
            const cell = document.createElement('div');
            const brightness = grid.cells[i];
            cell.style.width = '20px';
            cell.style.height = '20px';
            cell.style.background = `rgb(${{brightness}},${{brightness}},${{brightness}})`;
            cell.style.border = '1px solid #ccc';
            cell.onclick = () => updateCell(i);
            gridDiv.appendChild(cell);
        }}
    }}
    renderGrid();
</script>
"""


def letter_page(letter: str, interactive: bool = False) -> str:
    """Render the page for one big letter.

    With ``interactive`` set, the page also gets the clickable grid.
    """
    body = _LETTER_TEMPLATE.format(letter=letter)
    if interactive:
        body += _GRID_WIDGET.format(size=GRID_SIZE)
    return body


PAGE_A = letter_page("A", interactive=True)
PAGE_B = letter_page("B")
PAGE_C = letter_page("C")
