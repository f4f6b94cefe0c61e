"""Progressive web app boilerplate built from the core emitters."""

from __future__ import annotations

from golfkit.dom import render_element
from golfkit.printable import Printable, Text
from golfkit.statements import invoke, prop


def register_service_worker(path: Printable = Text("/sw.js")) -> str:
    """``navigator.serviceWorker?.register('/sw.js')``"""
    return invoke(prop("navigator", "serviceWorker?", "register"), path)


def manifest_link(path: str = "m.webmanifest") -> str:
    return render_element(
        "link", attributes={"rel": "manifest", "href": path}, self_closing=True
    )


def viewport_meta(content: str = "width=device-width,initial-scale=1") -> str:
    return render_element(
        "meta", attributes={"name": "viewport", "content": content}, self_closing=True
    )


def mobile_meta() -> str:
    return "".join(
        render_element("meta", attributes={"name": name, "content": "yes"}, self_closing=True)
        for name in ("mobile-web-app-capable", "apple-mobile-web-app-capable")
    )


def html_doctype(lang: str = "en") -> str:
    """``<!DOCTYPE html><html lang=en>``"""
    return render_element(
        "!DOCTYPE", attributes={"html": None}, self_closing=True
    ) + render_element("html", attributes={"lang": lang}, self_closing=True)


def title_tag(title: str) -> str:
    return render_element("title", children=title)
