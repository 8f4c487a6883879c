import sys
from pathlib import Path
project_root = Path(__file__).resolve().parent.parent
sys.path.append(str(project_root / "src"))
from services.tables import LookupTables
from services.lookup import lookup_pali

# Usage: python scripts/check_lookup.py [word ...]
tables = LookupTables.get_instance()
print(f"Loading tables from {tables.data_dir}...")
dictionary = tables.dictionary("pli", "en")
inflections = tables.inflections()
decompositions = tables.deconstructions()

words = sys.argv[1:] or ["buddhassa", "dhammavinaya", "appamādena", "gacchāmī’ti", "sopi"]
for w in words:
    matches = lookup_pali(w, dictionary, inflections, decompositions, tables.endings())
    if not matches:
        print(f"Word: {w} - Not found")
        continue
    print(f"Word: {w}")
    for m in matches:
        if m.entry is not None:
            print(f"  {m.base}: {m.entry.get('d')}")
        else:
            print(f"  {m.base}: ({m.meaning})")
    print("-" * 20)
