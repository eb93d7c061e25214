import os
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed

import pandas as pd

from . import config
from .core import build_owner_data
from .counties import get_adapter
from .exceptions import OwnerMapperError, PropertyIdNotFoundError
from .utils import get_property_id, print_status, read_document, write_json

logger = logging.getLogger(__name__)

INPUT_EXTENSIONS = (".html", ".htm", ".json")


def process_document(filepath, county, property_id=None, extra_keywords=None, id_from_filename=False):
    """Map the owners of one property document.

    The property id comes from `property_id`, then the document itself, then
    (only when `id_from_filename` is set) the file name.
    """
    adapter = get_adapter(county)
    document = adapter.parse(read_document(filepath, adapter.input_format))

    if not property_id:
        property_id = adapter.property_id(document)
    if not property_id and id_from_filename:
        property_id = get_property_id(filepath)
        logger.info(f"Using file name as property id for {filepath}: {property_id}")
    if not property_id:
        raise PropertyIdNotFoundError(f"Property identifier not found in {filepath}")

    candidates = list(adapter.owner_candidates(document))
    logger.info(f"Found {len(candidates)} owner candidate(s) in {filepath}")
    return build_owner_data(property_id, candidates, adapter.keywords(extra_keywords))


def output_path(output_dir=None, output_file=None):
    return os.path.join(output_dir or config.OUTPUT_DIR, output_file or config.OUTPUT_FILE)


def run(input_path, county, output_dir=None, output_file=None, property_id=None, extra_keywords=None):
    """Process one document and write owners/owner_data.json"""
    data = process_document(input_path, county, property_id=property_id, extra_keywords=extra_keywords)
    path = output_path(output_dir, output_file)
    write_json(path, data)
    print_status(f"Owner data saved to {path}")
    return data


def list_input_files(input_dir):
    if not os.path.isdir(input_dir):
        raise OwnerMapperError(f"Input directory {input_dir} does not exist")
    return sorted(
        os.path.join(input_dir, name)
        for name in os.listdir(input_dir)
        if name.lower().endswith(INPUT_EXTENSIONS)
    )


def summarize(data):
    """One row per property with owner and invalid-name counts"""
    rows = []
    for property_key, record in data.items():
        owners_by_date = record["owners_by_date"]
        current = owners_by_date.get("current", [])
        rows.append({
            "property": property_key,
            "current_owners": len(current),
            "current_companies": sum(1 for o in current if o["type"] == "company"),
            "current_persons": sum(1 for o in current if o["type"] == "person"),
            "dated_buckets": sum(1 for key in owners_by_date if key != "current"),
            "invalid_owners": len(record["invalid_owners"]),
        })
    columns = ["property", "current_owners", "current_companies", "current_persons",
               "dated_buckets", "invalid_owners"]
    return pd.DataFrame(rows, columns=columns)


def run_batch(input_dir, county, output_dir=None, output_file=None, extra_keywords=None, max_workers=None):
    """Process every document in a directory on a thread pool.

    Returns (merged owner data, summary DataFrame, {file: error}).
    """
    files = list_input_files(input_dir)
    if not files:
        raise OwnerMapperError(f"No HTML or JSON files found in {input_dir}")
    print_status(f"Found {len(files)} files to process")

    results = {}
    failures = {}
    with ThreadPoolExecutor(max_workers=max_workers or config.MAX_WORKERS) as executor:
        futures = {
            executor.submit(
                process_document, path, county, None, extra_keywords, True
            ): path
            for path in files
        }
        for future in as_completed(futures):
            path = futures[future]
            try:
                results[path] = future.result()
            except Exception as e:
                logger.error(f"❌ Failed to process {path}: {e}")
                failures[path] = str(e)

    merged = {}
    for path in files:
        if path in results:
            merged.update(results[path])

    output_dir = output_dir or config.OUTPUT_DIR
    write_json(output_path(output_dir, output_file), merged)

    summary = summarize(merged)
    summary_path = os.path.join(output_dir, config.SUMMARY_FILE)
    summary.to_csv(summary_path, index=False)
    logger.info(f"Wrote summary for {len(summary)} properties to {summary_path}")

    print_status(f"Processed {len(merged)} properties, {len(failures)} failed")
    return merged, summary, failures
