"""Static landing page with an embedded GraphiQL client."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter()

GRAPHIQL_VERSION = "3.0.10"

INDEX_HTML = f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>Star Wars GraphQL</title>
  <link rel="stylesheet" href="https://unpkg.com/graphiql@{GRAPHIQL_VERSION}/graphiql.min.css">
  <style>html, body, #graphiql {{ height: 100%; margin: 0; }}</style>
</head>
<body>
  <div id="graphiql">Loading...</div>
  <script src="https://unpkg.com/react@18/umd/react.production.min.js" crossorigin></script>
  <script src="https://unpkg.com/react-dom@18/umd/react-dom.production.min.js" crossorigin></script>
  <script src="https://unpkg.com/graphiql@{GRAPHIQL_VERSION}/graphiql.min.js" crossorigin></script>
  <script>
    const fetcher = GraphiQL.createFetcher({{ url: "/gql" }});
    const defaultQuery = "{{ hero {{ name friends {{ name }} }} }}";
    ReactDOM.createRoot(document.getElementById("graphiql")).render(
      React.createElement(GraphiQL, {{ fetcher, defaultQuery }})
    );
  </script>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index() -> str:
    return INDEX_HTML
