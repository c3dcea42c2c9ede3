"""
Demo roster, used when no sheet URL is configured.

    Catherine (CEO)
    └── Pauline (COO)
        ├── Janine (Admin Head) ── Angela, Con
        ├── Jeanne (Marketing Head) ── Kriselle ── Kez, Edgar, Franz, Kei
        ├── Gjay (Ads Team Lead) ── Olivet
        ├── Sharry (Production Head) ── Micah
        ├── Ryan (US Warehouse Manager) ── Michael, Dean, Claude
        └── Robert (China Warehouse Manager) ── Mary
"""

from typing import Dict, List

DEMO_ROWS: List[Dict[str, str]] = [
    {"Name": "Catherine", "Title": "CEO", "Department": "", "Manager": ""},
    {"Name": "Pauline", "Title": "COO", "Department": "", "Manager": "Catherine"},

    {"Name": "Janine", "Title": "Admin Head", "Department": "Admin", "Manager": "Pauline"},
    {"Name": "Angela", "Title": "Operations Manager", "Department": "Admin", "Manager": "Janine"},
    {"Name": "Con", "Title": "Office Manager", "Department": "Admin", "Manager": "Janine"},

    {"Name": "Jeanne", "Title": "Marketing Head", "Department": "Marketing", "Manager": "Pauline"},
    {"Name": "Kriselle", "Title": "Marketing Manager", "Department": "Marketing", "Manager": "Jeanne"},
    {"Name": "Kez", "Title": "Social Media Lead", "Department": "Marketing", "SubDepartment": "Social", "Manager": "Kriselle"},
    {"Name": "Edgar", "Title": "Content Creator", "Department": "Marketing", "SubDepartment": "Content", "Manager": "Kriselle"},
    {"Name": "Franz", "Title": "Designer", "Department": "Marketing", "SubDepartment": "Content", "Manager": "Kriselle"},
    {"Name": "Kei", "Title": "Ads Specialist", "Department": "Marketing", "SubDepartment": "Ads", "Manager": "Kriselle"},

    {"Name": "Gjay", "Title": "Ads Team Lead", "Department": "Marketing", "Manager": "Pauline"},
    {"Name": "Olivet", "Title": "Ads Manager", "Department": "Marketing", "Manager": "Gjay"},

    {"Name": "Sharry", "Title": "Production Head", "Department": "Production", "Manager": "Pauline"},
    {"Name": "Micah", "Title": "Production Manager", "Department": "Production", "Manager": "Sharry"},

    {"Name": "Ryan", "Title": "US Warehouse Manager", "Department": "Warehouse", "Manager": "Pauline"},
    {"Name": "Michael", "Title": "Warehouse Staff", "Department": "Warehouse", "Manager": "Ryan"},
    {"Name": "Dean", "Title": "Warehouse Staff", "Department": "Warehouse", "Manager": "Ryan"},
    {"Name": "Claude", "Title": "Warehouse Staff", "Department": "Warehouse", "Manager": "Ryan"},

    {"Name": "Robert", "Title": "China Warehouse Manager", "Department": "Warehouse", "Manager": "Pauline"},
    {"Name": "Mary", "Title": "Warehouse Staff", "Department": "Warehouse", "Manager": "Robert"},
]
