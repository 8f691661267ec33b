"""Fixed catalog the store is seeded with at process start."""

from typing import List

from ..models.product import Product, Warehouse

WAREHOUSES = (
    ("BLR-A", "Bangalore Alpha", "Bangalore", "India"),
    ("PNQ-C", "Pune Charlie", "Pune", "India"),
    ("DEL-B", "Delhi Beta", "Delhi", "India"),
    ("MUM-D", "Mumbai Delta", "Mumbai", "India"),
)

# (id, name, sku, warehouse, stock, demand)
PRODUCTS = (
    ("P-1001", "12mm Hex Bolt", "HEX-12-100", "BLR-A", 180, 120),
    ("P-1002", "Steel Washer", "WSR-08-500", "BLR-A", 50, 80),
    ("P-1003", "M8 Nut", "NUT-08-200", "PNQ-C", 80, 80),
    ("P-1004", "Bearing 608ZZ", "BRG-608-50", "DEL-B", 24, 120),
    ("P-1005", "Stainless Steel Screw", "SCR-SS-300", "MUM-D", 200, 150),
    ("P-1006", "Rubber Gasket", "GSK-RB-100", "BLR-A", 75, 90),
    ("P-1007", "Aluminum Plate", "PLT-AL-250", "PNQ-C", 45, 60),
    ("P-1008", "Copper Wire", "WIR-CU-500", "DEL-B", 120, 100),
    ("P-1009", "Plastic Connector", "CON-PL-200", "MUM-D", 30, 45),
    ("P-1010", "Carbon Steel Rod", "ROD-CS-150", "BLR-A", 85, 85),
    ("P-1011", "Brass Bushing", "BSH-BR-075", "PNQ-C", 60, 70),
    ("P-1012", "Nylon Spacer", "SPC-NY-010", "DEL-B", 140, 90),
    ("P-1013", "Zinc Plated Screw", "SCR-ZN-120", "MUM-D", 110, 95),
    ("P-1014", "Hex Key Set", "KEY-HX-SET", "BLR-A", 22, 40),
    ("P-1015", "Stainless Clamp", "CLP-SS-050", "PNQ-C", 95, 130),
    ("P-1016", "PVC Tube", "TUB-PVC-300", "DEL-B", 300, 200),
    ("P-1017", "Ceramic Fuse", "FUS-CR-005", "MUM-D", 48, 52),
    ("P-1018", "Thermal Paste", "THM-PST-020", "BLR-A", 180, 210),
    ("P-1019", "Spring Washer", "WSR-SP-300", "PNQ-C", 250, 240),
    ("P-1020", "Tension Spring", "SPR-TN-060", "DEL-B", 70, 120),
    ("P-1021", "Grease Cartridge", "GRS-CT-400", "MUM-D", 40, 75),
    ("P-1022", "O-Ring Set", "ORG-SET-100", "BLR-A", 160, 140),
    ("P-1023", "Allen Bolt M6", "BLT-AL-006", "PNQ-C", 95, 85),
    ("P-1024", "Flanged Nut M10", "NUT-FL-010", "DEL-B", 55, 90),
    ("P-1025", "Stainless Rivet", "RVT-SS-100", "MUM-D", 400, 350),
    ("P-1026", "Cable Tie 200mm", "TIE-CB-200", "BLR-A", 500, 420),
    ("P-1027", "Heat Shrink 3mm", "HSK-003-100", "PNQ-C", 130, 110),
    ("P-1028", "Solder Wire 60/40", "SLD-6040-250", "DEL-B", 85, 125),
    ("P-1029", "Ball Bearing 6202", "BRG-6202-20", "MUM-D", 28, 70),
    ("P-1030", "Plastic Cap 10mm", "CAP-PL-010", "BLR-A", 220, 180),
    ("P-1031", "Rubber Foot Pad", "PAD-RB-040", "PNQ-C", 60, 55),
    ("P-1032", "Silicone Sealant", "SLN-SI-300", "DEL-B", 190, 210),
    ("P-1033", "Threadlocker Blue", "THR-LOC-050", "MUM-D", 35, 65),
    ("P-1034", "Metal Spacer 5mm", "SPC-MT-005", "BLR-A", 145, 130),
    ("P-1035", "DIN Rail 35mm", "RAIL-35-100", "PNQ-C", 90, 140),
    ("P-1036", "Crimp Terminal M4", "CRM-M4-200", "DEL-B", 260, 220),
    ("P-1037", "Velcro Strap 30cm", "VLC-030-050", "MUM-D", 70, 95),
    ("P-1038", "Stainless Shim 0.2mm", "SHM-SS-020", "BLR-A", 44, 80),
    ("P-1039", "PTFE Tape", "PTF-TAP-010", "PNQ-C", 320, 310),
    ("P-1040", "Galvanized Angle", "ANG-GL-050", "DEL-B", 18, 40),
    ("P-1041", "Cable Gland PG9", "GLD-PG9-050", "MUM-D", 150, 170),
    ("P-1042", "Stainless Wire Mesh", "MSH-SS-100", "BLR-A", 65, 60),
    ("P-1043", "Brass Nozzle 0.4mm", "NZL-BR-004", "PNQ-C", 42, 90),
    ("P-1044", "Steel Pipe 1/2\"", "PIP-ST-050", "DEL-B", 88, 120),
    ("P-1045", "Aluminum Extrusion 2020", "EXT-AL-2020", "MUM-D", 210, 180),
)


def seed_warehouses() -> List[Warehouse]:
    return [Warehouse(code, name, city, country) for code, name, city, country in WAREHOUSES]


def seed_products() -> List[Product]:
    return [
        Product(id=pid, name=name, sku=sku, warehouse=warehouse, stock=stock, demand=demand)
        for pid, name, sku, warehouse, stock, demand in PRODUCTS
    ]
