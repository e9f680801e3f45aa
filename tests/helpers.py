from pagekit.models.page import STATUS_PUBLISHED, Page


def make_page(db, alias: str, **fields) -> Page:
    values = {
        "name": alias.replace("-", " ").title(),
        "alias": alias,
        "content": f"<p>{alias} content</p>",
        "locale": "en-US",
        "status": STATUS_PUBLISHED,
    }
    values.update(fields)
    page = Page(**values)
    db.add(page)
    db.commit()
    db.refresh(page)
    return page
