"""
GridFleet Synthetic Fleet — Reference Catalog
===============================================
Static, immutable domain tables the generator draws from:
  - Six utility operating companies and their service-territory geometry
  - Substation name pools per operating company
  - Failure-mode taxonomy with age eligibility, materials and crew skills
  - Diagnostic narrative templates (one per failure mode)
  - Work-order templates (preventive, corrective, inspection, test)
  - Nameplate vocabularies (manufacturers, cooling, subtypes)
  - IEEE C57.104 dissolved-gas condition limits

Nothing in this module draws random numbers; the tables are read-only and
shared by every synthesis channel.
"""

from .ontology import (
    OperatingCompany, RegionGeometry, DensityCenter, VoltageClass,
    FailureModeProfile, DiagnosticTemplate, TriggerSlot, WorkOrderTemplate,
    Severity,
)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  OPERATING COMPANIES
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

OPERATING_COMPANIES: tuple[OperatingCompany, ...] = (
    OperatingCompany(id="ComEd", name="ComEd", state="IL", customers=4_000_000,
                     territory="Northern Illinois", center=(41.88, -87.75),
                     outages_10yr=5420, avg_restore_hours=3.8, peak_mw=22500),
    OperatingCompany(id="PECO", name="PECO", state="PA", customers=1_700_000,
                     territory="SE Pennsylvania", center=(40.0, -75.15),
                     outages_10yr=3180, avg_restore_hours=4.8, peak_mw=8900),
    OperatingCompany(id="BGE", name="BGE", state="MD", customers=1_290_000,
                     territory="Central Maryland", center=(39.28, -76.62),
                     outages_10yr=2640, avg_restore_hours=4.1, peak_mw=7200),
    OperatingCompany(id="Pepco", name="Pepco", state="DC/MD", customers=919_000,
                     territory="DC Metro / Maryland", center=(38.9, -76.99),
                     outages_10yr=1580, avg_restore_hours=3.2, peak_mw=6400),
    OperatingCompany(id="ACE", name="ACE", state="NJ", customers=572_000,
                     territory="Southern New Jersey", center=(39.45, -74.6),
                     outages_10yr=890, avg_restore_hours=5.1, peak_mw=3100),
    OperatingCompany(id="DPL", name="DPL", state="DE/MD", customers=561_500,
                     territory="Delaware / E. Maryland", center=(39.0, -75.5),
                     outages_10yr=575, avg_restore_hours=4.4, peak_mw=2800),
)

OPCO_BY_ID: dict[str, OperatingCompany] = {o.id: o for o in OPERATING_COMPANIES}


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  SERVICE TERRITORY GEOMETRY — Density centers & voltage mix
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def _c(lat: float, lng: float, r: float, w: float) -> DensityCenter:
    return DensityCenter(lat=lat, lng=lng, radius=r, weight=w)


def _v(kv: str, share: float, cust_min: int, cust_max: int) -> VoltageClass:
    return VoltageClass(kv=kv, share=share, customers_min=cust_min, customers_max=cust_max)


# Iteration order defines the tag numbering of the fleet
REGIONS: tuple[RegionGeometry, ...] = (
    RegionGeometry(
        opco_id="ComEd", lat_min=41.35, lat_max=42.5, lng_min=-88.9, lng_max=-87.3,
        centers=(
            _c(41.88, -87.63, 0.15, 0.35),    # Chicago Loop
            _c(41.85, -87.75, 0.12, 0.15),
            _c(42.0, -87.7, 0.15, 0.12),
            _c(41.75, -88.0, 0.2, 0.1),
            _c(42.3, -87.85, 0.15, 0.08),
            _c(41.6, -87.6, 0.15, 0.08),
            _c(42.05, -88.3, 0.25, 0.06),
            _c(41.5, -88.1, 0.2, 0.06),
        ),
        substation_count=250,
        voltages=(
            _v("765", 0.01, 200000, 500000),
            _v("345", 0.06, 80000, 200000),
            _v("138", 0.28, 20000, 85000),
            _v("34.5", 0.35, 5000, 25000),
            _v("12", 0.30, 800, 6000),
        ),
    ),
    RegionGeometry(
        opco_id="PECO", lat_min=39.8, lat_max=40.35, lng_min=-75.65, lng_max=-74.85,
        centers=(
            _c(39.95, -75.17, 0.08, 0.3),     # Center City Philadelphia
            _c(40.1, -75.3, 0.12, 0.2),
            _c(40.0, -75.45, 0.15, 0.15),
            _c(39.88, -75.35, 0.1, 0.12),
            _c(40.2, -75.1, 0.1, 0.12),
            _c(40.15, -75.55, 0.12, 0.11),
        ),
        substation_count=100,
        voltages=(
            _v("230", 0.08, 40000, 120000),
            _v("138", 0.15, 15000, 55000),
            _v("69", 0.32, 5000, 20000),
            _v("13.2", 0.45, 800, 6000),
        ),
    ),
    RegionGeometry(
        opco_id="BGE", lat_min=38.3, lat_max=39.7, lng_min=-77.0, lng_max=-76.15,
        centers=(
            _c(39.28, -76.62, 0.1, 0.3),      # Baltimore
            _c(39.15, -76.75, 0.15, 0.15),
            _c(39.4, -76.45, 0.12, 0.15),
            _c(39.2, -76.85, 0.15, 0.12),
            _c(38.98, -76.5, 0.2, 0.1),
            _c(38.5, -76.45, 0.15, 0.08),
            _c(39.55, -76.3, 0.15, 0.1),
        ),
        substation_count=80,
        voltages=(
            _v("500", 0.03, 80000, 200000),
            _v("230", 0.1, 30000, 90000),
            _v("115", 0.3, 10000, 40000),
            _v("34.5", 0.25, 3000, 15000),
            _v("13.2", 0.32, 500, 4000),
        ),
    ),
    RegionGeometry(
        opco_id="Pepco", lat_min=38.7, lat_max=39.2, lng_min=-77.25, lng_max=-76.75,
        centers=(
            _c(38.9, -77.02, 0.06, 0.35),     # Washington DC
            _c(38.98, -77.1, 0.08, 0.2),
            _c(39.08, -77.15, 0.1, 0.15),
            _c(38.82, -76.88, 0.08, 0.15),
            _c(38.95, -76.93, 0.08, 0.15),
        ),
        substation_count=60,
        voltages=(
            _v("230", 0.08, 40000, 100000),
            _v("69", 0.35, 8000, 35000),
            _v("13.8", 0.57, 800, 8000),
        ),
    ),
    RegionGeometry(
        opco_id="ACE", lat_min=39.0, lat_max=40.2, lng_min=-75.2, lng_max=-74.0,
        centers=(
            _c(39.36, -74.42, 0.1, 0.25),     # Atlantic City
            _c(39.5, -74.75, 0.15, 0.2),
            _c(39.8, -75.0, 0.12, 0.15),
            _c(39.15, -74.8, 0.12, 0.15),
            _c(39.95, -74.2, 0.1, 0.12),
            _c(39.65, -74.55, 0.12, 0.13),
        ),
        substation_count=50,
        voltages=(
            _v("230", 0.06, 25000, 80000),
            _v("69", 0.3, 5000, 25000),
            _v("13.2", 0.64, 500, 6000),
        ),
    ),
    RegionGeometry(
        opco_id="DPL", lat_min=38.4, lat_max=39.85, lng_min=-75.8, lng_max=-75.0,
        centers=(
            _c(39.74, -75.55, 0.08, 0.3),     # Wilmington
            _c(39.6, -75.7, 0.1, 0.15),
            _c(39.2, -75.55, 0.15, 0.12),
            _c(38.7, -75.15, 0.2, 0.12),
            _c(38.55, -75.07, 0.15, 0.1),
            _c(38.95, -75.8, 0.15, 0.1),
            _c(39.0, -75.35, 0.12, 0.11),
        ),
        substation_count=50,
        voltages=(
            _v("230", 0.06, 20000, 65000),
            _v("138", 0.15, 8000, 30000),
            _v("69", 0.32, 3000, 15000),
            _v("13.2", 0.47, 400, 5000),
        ),
    ),
)

REGION_BY_OPCO: dict[str, RegionGeometry] = {r.opco_id: r for r in REGIONS}

# Background outage scatter for the heat map: (opco, point count, base, spread)
HEAT_BACKGROUND: tuple[tuple[str, int, float, float], ...] = (
    ("ComEd", 40, 0.15, 0.25),
    ("PECO", 20, 0.1, 0.3),
    ("BGE", 25, 0.1, 0.25),
    ("ACE", 15, 0.12, 0.3),
    ("DPL", 15, 0.08, 0.2),
    ("Pepco", 10, 0.12, 0.2),
)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  SUBSTATION NAME POOLS
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

SUBSTATION_NAMES: dict[str, tuple[str, ...]] = {
    "ComEd": ("Jefferson", "Elmhurst", "Crawford", "Fisk", "Electric Junction", "Maywood", "Cicero", "Berwyn", "Oak Park",
        "Evanston", "Skokie", "Palatine", "Schaumburg", "Naperville", "Aurora", "Joliet", "Waukegan", "Des Plaines",
        "Park Ridge", "Norridge", "Niles", "Morton Grove", "Glenview", "Northbrook", "Highland Park", "Lake Forest",
        "Libertyville", "Mundelein", "Round Lake", "Woodstock", "Crystal Lake", "McHenry", "Elgin", "St. Charles",
        "Geneva", "Batavia", "Oswego", "Plainfield", "Romeoville", "Lockport", "Lemont", "Orland Park", "Tinley Park",
        "Homewood", "Harvey", "Calumet", "Chicago Heights", "Lansing", "Hammond", "Gary", "Wicker Park", "Logan Square",
        "Albany Park", "Edgewater", "Rogers Park", "West Loop", "Pilsen", "Bridgeport", "Brighton Park", "Back of Yards",
        "Pullman", "Hegewisch", "South Chicago", "Blue Island", "Alsip", "Palos Hills", "Oak Lawn", "Evergreen Park",
        "Dolton", "Riverdale", "Wheaton", "Glen Ellyn", "Lombard", "Addison", "Wood Dale", "Bensenville", "Elk Grove",
        "Rolling Meadows", "Arlington Heights", "Mount Prospect", "Prospect Heights", "Buffalo Grove", "Wheeling",
        "Deerfield", "Vernon Hills", "Lincolnshire", "Lake Zurich", "Barrington", "Cary", "Algonquin", "Huntley",
        "DeKalb", "Sycamore", "Rochelle", "Dixon", "Sterling", "Ottawa", "Morris", "Kankakee", "Bourbonnais",
        "Bradley", "Manteno", "Peotone", "Mokena", "New Lenox", "Frankfort", "Matteson", "Richton Park", "Olympia Fields",
        "Flossmoor", "Country Club Hills", "Markham", "Midlothian", "Oak Forest", "Crestwood", "Worth", "Chicago Ridge",
        "Bedford Park", "Summit", "McCook", "Lyons", "Brookfield", "La Grange", "Western Springs", "Hinsdale",
        "Clarendon Hills", "Westmont", "Downers Grove", "Woodridge", "Bolingbrook", "Lisle", "Warrenville",
        "West Chicago", "Carol Stream", "Hanover Park", "Streamwood", "Bartlett", "Wayne", "South Elgin", "Dundee",
        "Carpentersville", "Hampshire", "Pingree Grove", "Gilberts", "Plano", "Yorkville", "Minooka", "Channahon",
        "Shorewood", "Troy", "Crest Hill", "Rockdale", "Coal City", "Braidwood", "Wilmington", "Watseka",
        "Pontiac", "Streator", "LaSalle", "Peru", "Oglesby", "Marseilles", "Seneca", "Sandwich", "Plano North"),
    "PECO": ("Plymouth Meeting", "Eddystone", "Whitpain", "Norristown", "Conshohocken", "King of Prussia",
        "Collegeville", "Pottstown", "Phoenixville", "West Chester", "Media", "Chester", "Marcus Hook", "Swarthmore",
        "Springfield", "Broomall", "Havertown", "Drexel Hill", "Upper Darby", "Lansdowne", "Yeadon", "Darby",
        "Folcroft", "Ridley Park", "Prospect Park", "Glenolden", "Norwood", "Interboro", "Collingdale", "Sharon Hill",
        "Clifton Heights", "Aldan", "Lansdowne East", "Ardmore", "Bryn Mawr", "Villanova", "Wayne", "Devon",
        "Malvern", "Exton", "Downingtown", "Coatesville", "Paoli", "Berwyn", "Bala Cynwyd", "Gladwyne", "Narberth",
        "Merion", "Penn Valley", "Wynnewood", "Overbrook", "Manayunk", "Roxborough", "Chestnut Hill", "Mount Airy",
        "Germantown", "Cheltenham", "Jenkintown", "Abington", "Glenside", "Wyndmoor", "Flourtown", "Fort Washington",
        "Ambler", "Horsham", "Warminster", "Doylestown", "New Hope", "Langhorne", "Bensalem", "Bristol", "Levittown",
        "Fairless Hills", "Morrisville", "Newtown", "Yardley", "Richboro", "Warrington", "Chalfont", "Souderton",
        "Perkasie", "Quakertown", "Sellersville", "Telford", "North Wales", "Lansdale", "Harleysville", "Skippack",
        "Limerick", "Royersford", "Trappe", "Schwenksville", "Green Lane", "Pennsburg", "East Greenville"),
    "BGE": ("Westport", "Canton", "Calvert Cliffs", "Riverside", "Dundalk", "Essex", "Middle River", "Towson",
        "Pikesville", "Owings Mills", "Reisterstown", "Westminster", "Eldersburg", "Ellicott City", "Columbia",
        "Laurel", "Bowie", "Odenton", "Severn", "Glen Burnie", "Pasadena", "Annapolis", "Severna Park", "Arnold",
        "Edgewater", "Crofton", "Gambrills", "Millersville", "Crownsville", "Hanover", "Arbutus", "Catonsville",
        "Woodlawn", "Randallstown", "Liberty", "Hampstead", "Manchester", "Taneytown", "Sykesville", "Marriottsville",
        "Clarksville", "Dayton", "Highland", "Savage", "Jessup", "Linthicum", "Brooklyn Park", "Curtis Bay",
        "Halethorpe", "Lansdowne MD", "Pump", "Hamilton", "Rosedale", "White Marsh", "Perry Hall", "Nottingham",
        "Joppa", "Edgewood", "Aberdeen", "Havre de Grace", "Bel Air", "Fallston", "Forest Hill", "Jarrettsville",
        "Pylesville", "Street", "North East", "Elkton", "Rising Sun", "Chesapeake City", "Perryville", "Port Deposit"),
    "Pepco": ("Benning Road", "Capitol Hill", "Takoma", "Silver Spring", "Bethesda", "Chevy Chase", "Rockville",
        "Gaithersburg", "Germantown MD", "Clarksburg", "Damascus", "Poolesville", "Potomac", "Cabin John",
        "Glen Echo", "Friendship Heights", "Tenleytown", "Georgetown", "Foggy Bottom", "Adams Morgan", "Columbia Heights",
        "Petworth", "Brookland", "Woodridge", "Michigan Park", "Fort Totten", "Brightwood", "Shepherd Park",
        "Wheaton", "Kensington", "Garrett Park", "Laytonsville", "Olney", "Burtonsville", "White Oak", "Adelphi",
        "College Park", "Greenbelt", "Beltsville", "Riverdale", "Hyattsville", "Landover", "Upper Marlboro",
        "Bowie MD", "Crofton MD", "Mitchellville", "Largo", "Temple Hills", "Oxon Hill", "Forestville",
        "District Heights", "Suitland", "Camp Springs", "Clinton", "Waldorf", "La Plata", "Indian Head",
        "Brandywine", "Aquasco", "Dunkirk", "Chesapeake Beach"),
    "ACE": ("Cardiff", "Lewis", "Pleasantville", "Atlantic City", "Egg Harbor", "Hammonton", "Vineland",
        "Millville", "Bridgeton", "Salem", "Pennsville", "Woodstown", "Glassboro", "Clayton", "Franklinville",
        "Williamstown", "Sicklerville", "Winslow", "Berlin", "Clementon", "Lindenwold", "Bellmawr", "Runnemede",
        "Woodbury", "Deptford", "Westville", "Paulsboro", "Swedesboro", "Mullica Hill", "Sewell", "Turnersville",
        "Blackwood", "Pine Hill", "Waterford", "Atco", "Medford", "Tabernacle", "Chatsworth", "Tuckerton",
        "Manahawkin", "Beach Haven", "Barnegat", "Waretown", "Forked River", "Lacey", "Bayville", "Beachwood",
        "Toms River", "Brick", "Point Pleasant", "Manasquan", "Asbury Park", "Ocean Grove", "Neptune"),
    "DPL": ("Indian River", "Edge Moor", "Christiana", "Newark DE", "Wilmington", "New Castle", "Bear",
        "Glasgow", "Middletown DE", "Odessa", "Townsend", "Smyrna", "Dover", "Camden", "Wyoming", "Felton",
        "Harrington", "Milford", "Georgetown DE", "Seaford", "Laurel DE", "Delmar", "Salisbury", "Fruitland",
        "Princess Anne", "Crisfield", "Pocomoke", "Snow Hill", "Berlin MD", "Ocean City", "Easton", "St. Michaels",
        "Cambridge", "Hurlock", "Federalsburg", "Denton", "Greensboro", "Ridgely", "Centreville", "Chestertown",
        "Rock Hall", "Galena", "Cecilton", "Chesapeake City DE", "North Claymont", "Talleyville", "Hockessin",
        "Pike Creek", "Stanton", "Newport", "Elsmere", "Holly Oak", "Brandywine DE", "Greenville DE"),
}


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  FAILURE-MODE TAXONOMY
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

INSULATION_DEGRADATION = "Insulation degradation"
BUSHING_FAILURE = "Bushing failure"
TAP_CHANGER_WEAR = "Tap changer wear"
COOLING_SYSTEM_FAILURE = "Cooling system failure"
WINDING_FAULT = "Winding fault"
OIL_CONTAMINATION = "Oil contamination"
GASKET_SEAL_LEAK = "Gasket/seal leak"

# Weights follow the fleet-wide failure-cause mix (%)
FAILURE_MODES: tuple[FailureModeProfile, ...] = (
    FailureModeProfile(INSULATION_DEGRADATION, min_age=25, weight=28,
                       materials=("Insulating oil", "Kraft paper", "Gaskets"),
                       skills=("Oil processing", "Vacuum treatment")),
    FailureModeProfile(BUSHING_FAILURE, min_age=15, weight=19,
                       materials=("Replacement bushing", "Gasket kit", "Transformer oil"),
                       skills=("HV bushing replacement", "Crane operation"),
                       heavy=True),
    FailureModeProfile(TAP_CHANGER_WEAR, min_age=10, weight=16,
                       materials=("OLTC contacts", "Drive mechanism parts", "Diverter oil"),
                       skills=("OLTC overhaul", "Mechanical adjustment")),
    FailureModeProfile(COOLING_SYSTEM_FAILURE, min_age=20, weight=14,
                       materials=("Radiator fans", "Oil pump", "Temperature sensors"),
                       skills=("Cooling system repair", "Electrical testing")),
    FailureModeProfile(WINDING_FAULT, min_age=30, weight=7,
                       materials=("Copper conductor", "Insulation wrap", "Core steel"),
                       skills=("Winding replacement", "Factory rebuild"),
                       heavy=True),
    FailureModeProfile(OIL_CONTAMINATION, min_age=5, weight=12,
                       materials=("Transformer oil", "Filter elements", "Desiccant"),
                       skills=("Oil filtration", "DGA sampling")),
    FailureModeProfile(GASKET_SEAL_LEAK, min_age=8, weight=4,
                       materials=("Nitrile gaskets", "Sealant", "Drain valve"),
                       skills=("Seal replacement", "Oil containment")),
)

FAILURE_MODE_BY_NAME: dict[str, FailureModeProfile] = {f.mode: f for f in FAILURE_MODES}
DEFAULT_FAILURE_MODE = FAILURE_MODE_BY_NAME[OIL_CONTAMINATION]


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  DIAGNOSTIC TEMPLATES — One narrative skeleton per failure mode
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

_CRIT, _WARN = Severity.CRITICAL, Severity.WARNING

DIAGNOSTIC_TEMPLATES: dict[str, DiagnosticTemplate] = {
    INSULATION_DEGRADATION: DiagnosticTemplate(
        failure_mode=INSULATION_DEGRADATION,
        triggers=(TriggerSlot("DGA TDCG Rising", "amber", "FlaskConical"),
                  TriggerSlot("Thermal Trending", "rose", "Thermometer"),
                  TriggerSlot("Load Stress", "sky", "Activity")),
        agent_ids=("dga", "thermal", "load"),
        finding_severities=(_CRIT, _CRIT, _WARN),
        analysis_methods=("IEEE C57.104", "Thermal Model", "Load Analytics"),
        cross_validation_label="Insulation Degradation Confirmed",
        cross_validation_detail="DGA trend + thermal aging + load stress converge",
        cross_links=("DGA ↔ Thermal correlation", "Load stress ↔ Insulation aging"),
    ),
    BUSHING_FAILURE: DiagnosticTemplate(
        failure_mode=BUSHING_FAILURE,
        triggers=(TriggerSlot("Bushing PF Alarm", "fuchsia", "Zap"),
                  TriggerSlot("OEM Bulletin", "cyan", "FileText"),
                  TriggerSlot("Visual Anomaly", "emerald", "Eye")),
        agent_ids=("electrical", "oem", "inspection"),
        finding_severities=(_CRIT, _CRIT, _WARN),
        analysis_methods=("Dielectric Analysis", "OEM Cross-Ref", "Field Inspect"),
        cross_validation_label="Bushing Failure Imminent",
        cross_validation_detail="PF exceedance + OEM recall + visual leak converge",
        cross_links=("Dielectric ↔ OEM batch defect", "Visual ↔ PF trending"),
    ),
    TAP_CHANGER_WEAR: DiagnosticTemplate(
        failure_mode=TAP_CHANGER_WEAR,
        triggers=(TriggerSlot("OLTC Counter Alert", "amber", "Activity"),
                  TriggerSlot("DGA in OLTC Oil", "rose", "FlaskConical"),
                  TriggerSlot("Electrical Test", "fuchsia", "Zap")),
        agent_ids=("history", "dga", "electrical"),
        finding_severities=(_CRIT, _WARN, _CRIT),
        analysis_methods=("OLTC Analytics", "Oil Analysis", "Contact Resistance"),
        cross_validation_label="OLTC Overhaul Required",
        cross_validation_detail="Operation count + DGA + contact wear converge",
        cross_links=("OLTC ops ↔ Contact degradation", "DGA ↔ Arcing detection"),
    ),
    COOLING_SYSTEM_FAILURE: DiagnosticTemplate(
        failure_mode=COOLING_SYSTEM_FAILURE,
        triggers=(TriggerSlot("Thermal Alarm", "rose", "Thermometer"),
                  TriggerSlot("Fan Failure", "sky", "Activity"),
                  TriggerSlot("Load Exceedance", "amber", "Activity")),
        agent_ids=("thermal", "condition", "load"),
        finding_severities=(_CRIT, _CRIT, _WARN),
        analysis_methods=("Thermal Model", "SCADA Diagnostics", "Load Analytics"),
        cross_validation_label="Cooling Deficiency Confirmed",
        cross_validation_detail="Thermal rise + fan failure + peak loading converge",
        cross_links=("Thermal ↔ Cooling capacity", "Load ↔ Temperature rise"),
    ),
    WINDING_FAULT: DiagnosticTemplate(
        failure_mode=WINDING_FAULT,
        triggers=(TriggerSlot("DGA Acetylene Spike", "rose", "FlaskConical"),
                  TriggerSlot("SFRA Deviation", "fuchsia", "Zap"),
                  TriggerSlot("PD Trending", "lime", "Activity")),
        agent_ids=("dga", "electrical", "condition"),
        finding_severities=(_CRIT, _CRIT, _CRIT),
        analysis_methods=("Duval Triangle", "SFRA Comparison", "PD Diagnostics"),
        cross_validation_label="Winding Fault Confirmed",
        cross_validation_detail="Acetylene + SFRA shift + PD activity converge",
        cross_links=("DGA ↔ Internal arcing", "SFRA ↔ Winding deformation"),
    ),
    OIL_CONTAMINATION: DiagnosticTemplate(
        failure_mode=OIL_CONTAMINATION,
        triggers=(TriggerSlot("Oil Quality Alert", "amber", "FlaskConical"),
                  TriggerSlot("Moisture Alarm", "cyan", "FlaskConical"),
                  TriggerSlot("Dielectric Drop", "fuchsia", "Zap")),
        agent_ids=("dga", "condition", "electrical"),
        finding_severities=(_WARN, _CRIT, _WARN),
        analysis_methods=("Oil Chemistry", "Moisture Model", "Dielectric Analysis"),
        cross_validation_label="Oil Reclamation Required",
        cross_validation_detail="Acidity + moisture + dielectric loss converge",
        cross_links=("Oil chemistry ↔ Moisture ingress", "Dielectric ↔ Contamination level"),
    ),
    GASKET_SEAL_LEAK: DiagnosticTemplate(
        failure_mode=GASKET_SEAL_LEAK,
        triggers=(TriggerSlot("Oil Level Drop", "amber", "Activity"),
                  TriggerSlot("Visual Seepage", "emerald", "Eye"),
                  TriggerSlot("PM Compliance", "violet", "ClipboardList")),
        agent_ids=("condition", "inspection", "history"),
        finding_severities=(_WARN, _CRIT, _WARN),
        analysis_methods=("Level Trending", "Field Inspect", "Maintenance History"),
        cross_validation_label="Seal Replacement Required",
        cross_validation_detail="Oil loss + visual seepage + repeat maintenance converge",
        cross_links=("Oil level ↔ Leak rate", "Inspection ↔ Gasket condition"),
    ),
}

DEFAULT_DIAGNOSTIC_TEMPLATE = DIAGNOSTIC_TEMPLATES[INSULATION_DEGRADATION]


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  WORK-ORDER TEMPLATES
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

PM_TEMPLATES: tuple[WorkOrderTemplate, ...] = (
    WorkOrderTemplate("Annual Oil Sampling & DGA",
                      "Collected oil samples for dissolved gas analysis, moisture, acidity, and dielectric "
                      "strength testing per IEEE C57.106.",
                      "2h", "Lab Tech", 1200),
    WorkOrderTemplate("Bushing Inspection & Cleaning",
                      "Visual and IR inspection of all HV/LV bushings. Cleaned porcelain surfaces, checked "
                      "oil levels, measured power factor.",
                      "4h", "Line Crew", 2800),
    WorkOrderTemplate("Cooling System Service",
                      "Inspected radiators, fans, and pumps. Cleaned fin surfaces, verified fan rotation, "
                      "checked oil flow indicators.",
                      "3h", "Mech Tech", 1800),
    WorkOrderTemplate("OLTC Maintenance",
                      "On-load tap changer contact inspection, oil sampling, operation counter read, and "
                      "timing test per manufacturer schedule.",
                      "6h", "Relay Tech", 4500),
    WorkOrderTemplate("Gasket & Seal Inspection",
                      "Inspected all external gaskets and seals for oil seepage. Checked conservator, "
                      "Buchholz relay, pressure relief device.",
                      "3h", "Line Crew", 1500),
    WorkOrderTemplate("Protective Relay Calibration",
                      "Tested and calibrated differential, overcurrent, and thermal relays. Verified trip "
                      "circuits and alarm setpoints.",
                      "4h", "Relay Tech", 3200),
    WorkOrderTemplate("Grounding System Test",
                      "Measured ground resistance, inspected ground connections, and verified continuity of "
                      "surge arrester grounding.",
                      "2h", "Line Crew", 900),
)

CM_TEMPLATES: tuple[WorkOrderTemplate, ...] = (
    WorkOrderTemplate("Oil Leak Repair — Main Tank",
                      "Repaired gasket leak at main tank flange. Drained oil, replaced gasket, refilled and tested.",
                      "8h", "Xfmr Crew", 12000),
    WorkOrderTemplate("Fan Motor Replacement",
                      "Replaced failed cooling fan motor. Verified rotation, airflow, and thermal response.",
                      "3h", "Mech Tech", 4200),
    WorkOrderTemplate("Bushing Replacement",
                      "Replaced degraded HV bushing after elevated power factor test results. Installed OEM "
                      "replacement.",
                      "16h", "Xfmr Crew", 35000),
    WorkOrderTemplate("OLTC Contact Replacement",
                      "Replaced worn tap changer contacts after increased contact resistance detected during "
                      "routine test.",
                      "12h", "Relay Tech", 18000),
    WorkOrderTemplate("Oil Processing / Degassing",
                      "Processed transformer oil to remove moisture and dissolved gases. Restored dielectric "
                      "strength to specification.",
                      "24h", "Oil Service", 8500),
    WorkOrderTemplate("Conservator Bladder Repair",
                      "Replaced deteriorated conservator bladder. Inspected Buchholz relay and silica gel breather.",
                      "6h", "Xfmr Crew", 7200),
)

INSP_TEMPLATES: tuple[WorkOrderTemplate, ...] = (
    WorkOrderTemplate("Quarterly Visual Inspection",
                      "Walked down transformer and checked for oil leaks, abnormal sounds, paint condition, "
                      "ground connections, and clearances.",
                      "1h", "Operator", 200),
    WorkOrderTemplate("IR Thermography Survey",
                      "Performed infrared scan of bushings, connections, radiators, and cooling equipment. "
                      "Compared to baseline.",
                      "2h", "IR Tech", 1500),
    WorkOrderTemplate("Ultrasonic / Acoustic Survey",
                      "Performed acoustic emission scan for partial discharge activity on bushings and winding area.",
                      "2h", "PD Tech", 2200),
    WorkOrderTemplate("Foundation & Civil Inspection",
                      "Inspected concrete pad, containment berm, fire wall, and drainage system for deterioration.",
                      "1h", "Civil Eng", 600),
)

TEST_TEMPLATES: tuple[WorkOrderTemplate, ...] = (
    WorkOrderTemplate("Sweep Frequency Response (SFRA)",
                      "Performed SFRA to detect winding deformation, core displacement, or clamping force changes.",
                      "4h", "Test Eng", 3500),
    WorkOrderTemplate("Bushing Power Factor Test",
                      "Measured C1 and C2 power factor and capacitance for all bushings per IEEE C57.19.01.",
                      "3h", "Test Eng", 2800),
    WorkOrderTemplate("Winding Resistance Test",
                      "Measured DC resistance of all windings at all tap positions to detect loose connections "
                      "or broken strands.",
                      "3h", "Test Eng", 2400),
    WorkOrderTemplate("Turns Ratio Test",
                      "Verified turns ratio at all tap positions against nameplate. Compared to factory test results.",
                      "2h", "Test Eng", 1800),
    WorkOrderTemplate("Insulation Resistance / PI Test",
                      "Measured insulation resistance and polarization index for all winding combinations at 5kV.",
                      "2h", "Test Eng", 1600),
)

EMERGENCY_TEMPLATE = WorkOrderTemplate(
    "Emergency De-energization & Inspection",
    "Transformer de-energized after Buchholz alarm / sudden gas accumulation. Emergency inspection of tank "
    "internals, bushings, and tap changer.",
    "24h", "Emergency Crew", 45000,
)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  NAMEPLATE VOCABULARIES
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

MANUFACTURERS = ("ABB", "GE Prolec", "Siemens", "Westinghouse", "Hitachi Energy",
                 "Hyundai", "ERMCO", "Virginia Transformer")
COOLING_TYPES = ("ONAN", "ONAF", "ONAN/ONAF", "OFAF", "ODAF")
TRANSFORMER_SUBTYPES = ("Auto-Transformer", "Power Transformer", "Station Transformer", "GSU Transformer")


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  IEEE C57.104 — Dissolved gas condition limits (ppm)
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

# Upper bound of conditions 1, 2, 3; anything above is condition 4
DGA_CONDITION_LIMITS: dict[str, tuple[int, int, int]] = {
    "h2": (100, 200, 500),
    "ch4": (75, 125, 200),
    "c2h2": (2, 10, 35),
    "c2h4": (50, 100, 200),
    "c2h6": (20, 50, 100),
    "co": (350, 700, 1000),
    "tdcg": (720, 1920, 4630),
}
