import json

_NO_JSON = object()


class FakeResponse:
    def __init__(self, status_code: int = 200, json_data=_NO_JSON, headers=None, text: str = ""):
        self.status_code = status_code
        self._json_data = json_data
        self.headers = headers or {}
        if text:
            self.text = text
        elif json_data is _NO_JSON:
            self.text = ""
        else:
            self.text = json.dumps(json_data)

    def json(self):
        if self._json_data is _NO_JSON:
            # requests raises a ValueError subclass for undecodable bodies
            raise ValueError(f"Expecting value: {self.text!r}")
        return self._json_data


def artist_item(name: str, followers: int = 0, image_url: str = None) -> dict:
    return {
        "name": name,
        "images": [{"url": image_url}] if image_url else [],
        "followers": {"total": followers},
    }


def search_payload(*items) -> dict:
    return {"artists": {"items": list(items)}}
