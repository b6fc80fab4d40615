import base64
import binascii
from io import BytesIO

from PIL import Image


def to_data_url(data: bytes, media_type: str) -> str:
    encoded = base64.b64encode(data).decode("utf-8")
    return f"data:{media_type};base64,{encoded}"


def decode_data_url(data_url: str) -> Image.Image:
    """
    Decode a base64 data URL into an RGB bitmap.

    Transparent pixels are flattened onto white, the way a JPEG page would show them.

    Raises:
        ValueError: the URL is malformed or the payload is not a readable image.
    """
    header, sep, payload = data_url.partition(",")
    if not sep or not header.startswith("data:") or not header.endswith(";base64"):
        raise ValueError("not a base64 data URL")

    try:
        raw = base64.b64decode(payload, validate=True)
    except binascii.Error as exc:
        raise ValueError("invalid base64 payload") from exc

    try:
        with Image.open(BytesIO(raw)) as image:
            image.load()
            if image.mode in ("RGBA", "LA") or (image.mode == "P" and "transparency" in image.info):
                rgba = image.convert("RGBA")
                flattened = Image.new("RGB", rgba.size, (255, 255, 255))
                flattened.paste(rgba, mask=rgba.getchannel("A"))
                return flattened
            return image.convert("RGB")
    except (OSError, Image.DecompressionBombError) as exc:
        raise ValueError("image could not be decoded") from exc
