import http.server
import os
import threading

CONTENT_TYPES = {
    ".html": "text/html",
    ".js": "application/javascript",
    ".css": "text/css",
    ".json": "application/json",
    ".png": "image/png",
    ".jpg": "image/jpeg",
}


def content_type_for(path):
    return CONTENT_TYPES.get(os.path.splitext(path)[1].lower(), "application/octet-stream")


class StaticFileHandler(http.server.BaseHTTPRequestHandler):
    """Serves the browser client out of ``root``. Bound per server via make_handler()."""

    root = "."

    def resolve(self):
        path = self.path.split("?")[0].split("#")[0]
        if path == "/":
            path = "/index.html"
        root = os.path.realpath(self.root)
        full = os.path.realpath(os.path.join(root, path.lstrip("/")))
        # Refuse anything that escapes the asset directory (../ etc.)
        if os.path.commonpath([root, full]) != root:
            return None
        return full

    def do_GET(self):
        full = self.resolve()
        if full is None or not os.path.isfile(full):
            self._send_text(404, "File not found")
            return
        try:
            with open(full, "rb") as f:
                content = f.read()
        except OSError as e:
            print(f"[HTTP] Failed to read {full}: {e}")
            self._send_text(500, "Server error")
            return
        self.send_response(200)
        self.send_header("Content-Type", content_type_for(full))
        self.send_header("Content-Length", str(len(content)))
        self.end_headers()
        self.wfile.write(content)

    def _send_text(self, status, text):
        body = text.encode()
        self.send_response(status)
        self.send_header("Content-Type", "text/plain")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass  # Suppress routine request logs

    def log_error(self, format, *args):
        print(f"[HTTP] {self.client_address[0]} - {format % args}")


def make_handler(directory):
    return type("BoundStaticFileHandler", (StaticFileHandler,), {"root": directory})


def start_static_server(directory, host="0.0.0.0", port=8000):
    """Start a threaded HTTP server for the client assets in a daemon thread."""
    httpd = http.server.ThreadingHTTPServer((host, port), make_handler(directory))
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    print(f"[HTTP] Serving {os.path.abspath(directory)} at http://{host}:{httpd.server_address[1]}")
    return httpd
