"""Dictionary endpoints: browse, search and mark catalog words."""
from fastapi import APIRouter, Depends, HTTPException, Query

from config import settings
from dependencies import get_catalog, get_progress_store
from schemas.dictionary import DictionaryEntry, DictionaryPage, DictionaryRow, LevelList
from schemas.progress import StatusUpdate, WordStatus
from services.catalog import Catalog
from services.dictionary import StatusFilter, browse, neighbours
from services.progress import WRITE_FAILED_MESSAGE, ProgressStore, ProgressWriteError

router = APIRouter(prefix="/api/dictionary", tags=["dictionary"])


@router.get("/levels", response_model=LevelList)
async def get_dictionary_levels(catalog: Catalog = Depends(get_catalog)):
    return LevelList(levels=catalog.levels())


@router.get("", response_model=DictionaryPage)
async def get_dictionary(
    q: str = Query(default=""),
    status: StatusFilter = Query(default="all"),
    level: int | None = Query(default=None),
    page: int = Query(default=1),
    catalog: Catalog = Depends(get_catalog),
    store: ProgressStore = Depends(get_progress_store),
):
    listing = browse(
        catalog.items,
        store,
        query=q,
        status=status,
        level=level,
        page=page,
        page_size=settings.DICTIONARY_PAGE_SIZE,
        search_limit=settings.SEARCH_RESULT_LIMIT,
    )
    rows = [
        DictionaryRow(
            word=item.word,
            level=item.level,
            core_meaning=item.content.core_meaning,
            status=store.get_status(item.word),
        )
        for item in listing.items
    ]
    return DictionaryPage(
        items=rows,
        page=listing.page,
        total_pages=listing.total_pages,
        total_matches=listing.total_matches,
        search_mode=listing.search_mode,
    )


@router.get("/{word}", response_model=DictionaryEntry)
async def get_dictionary_entry(
    word: str,
    q: str = Query(default=""),
    status: StatusFilter = Query(default="all"),
    level: int | None = Query(default=None),
    page: int = Query(default=1),
    catalog: Catalog = Depends(get_catalog),
    store: ProgressStore = Depends(get_progress_store),
):
    item = catalog.get(word)
    if not item:
        raise HTTPException(status_code=404, detail="Word not found")
    listing = browse(
        catalog.items,
        store,
        query=q,
        status=status,
        level=level,
        page=page,
        page_size=settings.DICTIONARY_PAGE_SIZE,
        search_limit=settings.SEARCH_RESULT_LIMIT,
    )
    previous_word, next_word = neighbours(listing, word)
    return DictionaryEntry(
        item=item,
        status=store.get_status(word),
        previous_word=previous_word,
        next_word=next_word,
    )


@router.put("/{word}/status", response_model=WordStatus)
async def update_dictionary_status(
    word: str,
    data: StatusUpdate,
    catalog: Catalog = Depends(get_catalog),
    store: ProgressStore = Depends(get_progress_store),
):
    if not catalog.get(word):
        raise HTTPException(status_code=404, detail="Word not found")
    try:
        await store.set_status(word, data.status)
    except ProgressWriteError as exc:
        raise HTTPException(status_code=503, detail=WRITE_FAILED_MESSAGE) from exc
    return WordStatus(word=word, status=store.get_status(word))
