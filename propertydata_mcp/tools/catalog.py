"""
Declarative catalog of PropertyData endpoints exposed as MCP tools.

Each `Endpoint` row is both the tool descriptor (name, description, input
schema) and its binding (REST path, forwarded parameters). The registry
derives the MCP `Tool` and the handler from the same row.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Tuple

from mcp import types

ParamKind = Literal["string", "number", "integer", "boolean"]


@dataclass(frozen=True)
class Param:
    key: str
    kind: ParamKind
    required: bool
    description: str


@dataclass(frozen=True)
class Endpoint:
    name: str
    path: str
    description: str
    params: Tuple[Param, ...] = ()
    group: str = ""

    @property
    def required_keys(self) -> List[str]:
        return [p.key for p in self.params if p.required]


def _postcode(description: str) -> Param:
    return Param("postcode", "string", True, description)


def _uprn() -> Param:
    return Param("uprn", "string", True, "Unique Property Reference Number")


def _address_optional() -> Param:
    return Param("address", "string", False, "Specific address for valuation (optional)")


def _area(name: str, path: str, description: str, postcode_help: str, group: str) -> Endpoint:
    """Shorthand for the common case: a single required postcode."""
    return Endpoint(name, path, description, (_postcode(postcode_help),), group)


def _valuation(name: str, path: str, description: str, postcode_help: str) -> Endpoint:
    return Endpoint(
        name,
        path,
        description,
        (_postcode(postcode_help), _address_optional()),
        "prices",
    )


ENDPOINTS: Tuple[Endpoint, ...] = (
    # Address & property lookup
    Endpoint(
        "address_match_uprn",
        "/address-match-uprn",
        "Match a UK property address to its Unique Property Reference Number (UPRN)",
        (Param("address", "string", True, "Full property address to match UPRN"),),
        "lookup",
    ),
    Endpoint("get_uprn_data", "/uprn", "Get property data using Unique Property Reference Number", (_uprn(),), "lookup"),
    _area("get_uprns", "/uprns", "Get all UPRNs in a postcode area", "UK postcode to get UPRNs for", "lookup"),
    Endpoint("get_uprn_title", "/uprn-title", "Get land registry title information for a UPRN", (_uprn(),), "lookup"),
    _area("get_title_data", "/title", "Get land registry title data for a postcode area", "UK postcode for title data", "lookup"),
    _area(
        "get_title_use_class",
        "/title-use-class",
        "Get planning use class data from land registry titles",
        "UK postcode for use class data",
        "lookup",
    ),
    # Area analysis
    _area(
        "get_estate_agents",
        "/agents",
        "Find estate agents operating in a specific postcode area",
        "UK postcode to search estate agents",
        "area",
    ),
    _area(
        "analyse_buildings",
        "/analyse-buildings",
        "Get building analysis data for a postcode area",
        "UK postcode of the area to analyze",
        "area",
    ),
    _area(
        "get_area_type",
        "/area-type",
        "Get area type classification (urban, suburban, rural etc.)",
        "UK postcode for area type data",
        "area",
    ),
    _area(
        "get_postcode_key_stats",
        "/postcode-key-stats",
        "Get key statistics summary for a postcode area",
        "UK postcode for key statistics",
        "area",
    ),
    _area("get_demographics", "/demographics", "Get demographic data for a postcode area", "UK postcode for demographic data", "area"),
    _area("get_population_data", "/population", "Get population data for a postcode area", "UK postcode for population data", "area"),
    _area(
        "get_household_income",
        "/household-income",
        "Get household income data for a postcode area",
        "UK postcode for household income data",
        "area",
    ),
    _area("get_politics_data", "/politics", "Get political/voting data for a postcode area", "UK postcode for political data", "area"),
    # Property prices & valuations
    _area("get_prices", "/prices", "Get current property prices for a postcode area", "UK postcode for property prices", "prices"),
    _area(
        "get_prices_per_sqf",
        "/prices-per-sqf",
        "Get property prices per square foot for a postcode area",
        "UK postcode for price per sqf data",
        "prices",
    ),
    _area(
        "get_sold_prices",
        "/sold-prices",
        "Get historical sold prices for a postcode area",
        "UK postcode for sold prices data",
        "prices",
    ),
    _area(
        "get_sold_prices_per_sqf",
        "/sold-prices-per-sqf",
        "Get historical sold prices per square foot for a postcode area",
        "UK postcode for sold prices per sqf data",
        "prices",
    ),
    _valuation(
        "get_valuation_sale",
        "/valuation-sale",
        "Get sale valuation estimate for a postcode area or specific address",
        "UK postcode for valuation",
    ),
    _valuation(
        "get_valuation_rent",
        "/valuation-rent",
        "Get rental valuation estimate for a postcode area or specific address",
        "UK postcode for rental valuation",
    ),
    _valuation(
        "get_valuation_hmo",
        "/valuation-hmo",
        "Get HMO (House in Multiple Occupation) valuation estimate",
        "UK postcode for HMO valuation",
    ),
    _valuation(
        "get_valuation_historical",
        "/valuation-historical",
        "Get historical valuation data for a postcode area or specific address",
        "UK postcode for historical valuations",
    ),
    _area("get_growth_data", "/growth", "Get property price growth data for a postcode area", "UK postcode for growth data", "prices"),
    _area(
        "get_growth_psf",
        "/growth-psf",
        "Get property price growth per square foot for a postcode area",
        "UK postcode for growth per sqf data",
        "prices",
    ),
    # Rental market
    _area(
        "get_rental_demand",
        "/demand",
        "Get property rental demand analytics for a postcode area",
        "UK postcode for rental demand data",
        "rental",
    ),
    _area(
        "get_rental_demand_rent",
        "/demand-rent",
        "Get rental demand with rent data for a postcode area",
        "UK postcode for rental demand and rent data",
        "rental",
    ),
    _area("get_rents", "/rents", "Get rental prices for a postcode area", "UK postcode for rental prices", "rental"),
    _area("get_rents_hmo", "/rents-hmo", "Get HMO rental prices for a postcode area", "UK postcode for HMO rental prices", "rental"),
    _area("get_yields", "/yields", "Get rental yield data for a postcode area", "UK postcode for rental yields", "rental"),
    _area("get_lha_rate", "/lha-rate", "Get Local Housing Allowance rates for a postcode area", "UK postcode for LHA rates", "rental"),
    # Development & investment
    _area(
        "get_sourced_properties",
        "/sourced-properties",
        "Get sourced investment properties for a postcode area",
        "UK postcode for sourced properties",
        "development",
    ),
    Endpoint(
        "get_sourced_property",
        "/sourced-property",
        "Get sourced property data for a specific UPRN",
        (_uprn(),),
        "development",
    ),
    Endpoint(
        "development_calculator",
        "/development-calculator",
        "Calculate development metrics for a postcode area",
        (
            _postcode("UK postcode for development calculation"),
            Param("build_cost", "number", False, "Build cost per unit (optional)"),
            Param("land_cost", "number", False, "Land acquisition cost (optional)"),
        ),
        "development",
    ),
    _area(
        "get_development_gdv",
        "/development-gdv",
        "Get Gross Development Value estimates for a postcode area",
        "UK postcode for GDV data",
        "development",
    ),
    _area(
        "get_build_cost",
        "/build-cost",
        "Get building cost estimates for a postcode area",
        "UK postcode for build cost data",
        "development",
    ),
    _area(
        "get_rebuild_cost",
        "/rebuild-cost",
        "Get rebuild cost estimates for insurance purposes",
        "UK postcode for rebuild cost data",
        "development",
    ),
    # Planning & regulations
    _area(
        "get_planning_applications",
        "/planning-applications",
        "Get planning applications for a postcode area",
        "UK postcode for planning applications",
        "planning",
    ),
    _area(
        "get_conservation_area",
        "/conservation-area",
        "Check if postcode area is in a conservation area",
        "UK postcode to check conservation area status",
        "planning",
    ),
    _area(
        "get_listed_buildings",
        "/listed-buildings",
        "Get listed buildings data for a postcode area",
        "UK postcode for listed buildings data",
        "planning",
    ),
    _area(
        "get_green_belt",
        "/green-belt",
        "Check if postcode area is in green belt land",
        "UK postcode to check green belt status",
        "planning",
    ),
    _area(
        "get_aonb_data",
        "/aonb",
        "Check if postcode area is in Area of Outstanding Natural Beauty",
        "UK postcode to check AONB status",
        "planning",
    ),
    _area(
        "get_national_park",
        "/national-park",
        "Check if postcode area is in a National Park",
        "UK postcode to check National Park status",
        "planning",
    ),
    # Market & financial data
    _area(
        "get_council_tax",
        "/council-tax",
        "Get council tax information for a postcode area",
        "UK postcode for council tax data",
        "finance",
    ),
    Endpoint(
        "mortgage_calculator",
        "/mortgage-calculator",
        "Calculate mortgage payments and affordability",
        (
            Param("loan_amount", "number", True, "Loan amount in GBP"),
            Param("deposit", "number", True, "Deposit amount in GBP"),
            Param("interest_rate", "number", True, "Annual interest rate as percentage"),
            Param("term_years", "integer", True, "Mortgage term in years"),
        ),
        "finance",
    ),
    _area(
        "get_mortgage_rates",
        "/mortgage-rates",
        "Get current mortgage rates for a postcode area",
        "UK postcode for mortgage rates",
        "finance",
    ),
    Endpoint(
        "stamp_duty_calculator",
        "/stamp-duty-calculator",
        "Calculate stamp duty liability",
        (
            Param("property_value", "number", True, "Property value in GBP"),
            Param("first_time_buyer", "boolean", False, "Whether buyer is first-time buyer (optional)"),
        ),
        "finance",
    ),
    # Property characteristics
    _area(
        "get_floor_areas",
        "/floor-areas",
        "Get floor area data for properties in a postcode area",
        "UK postcode for floor area data",
        "characteristics",
    ),
    _area(
        "get_freeholds",
        "/freeholds",
        "Get freehold/leasehold data for a postcode area",
        "UK postcode for freehold data",
        "characteristics",
    ),
    _area(
        "get_energy_efficiency",
        "/energy-efficiency",
        "Get energy efficiency (EPC) data for a postcode area",
        "UK postcode for energy efficiency data",
        "characteristics",
    ),
    # Location & amenities
    _area("get_flood_risk", "/flood-risk", "Get flood risk information for a postcode area", "UK postcode for flood risk data", "location"),
    _area("get_crime_data", "/crime", "Get crime statistics for a postcode area", "UK postcode for crime data", "location"),
    _area("get_schools_data", "/schools", "Get schools information for a postcode area", "UK postcode for schools data", "location"),
    _area(
        "get_ptal_data",
        "/ptal",
        "Get Public Transport Accessibility Level (PTAL) data for a postcode area",
        "UK postcode for PTAL data",
        "location",
    ),
    _area(
        "get_restaurants",
        "/restaurants",
        "Get restaurants and dining data for a postcode area",
        "UK postcode for restaurants data",
        "location",
    ),
    _area(
        "get_internet_speed",
        "/internet-speed",
        "Get internet speed data for a postcode area",
        "UK postcode for internet speed data",
        "location",
    ),
    # Registers
    _area(
        "get_national_hmo_register",
        "/national-hmo-register",
        "Get HMO license data from national HMO register",
        "UK postcode for HMO register data",
        "registers",
    ),
    # Documents & records
    _area(
        "get_land_registry_documents",
        "/land-registry-documents",
        "Get Land Registry documents for a postcode area",
        "UK postcode for Land Registry documents",
        "documents",
    ),
    _area(
        "get_site_plan_documents",
        "/site-plan-documents",
        "Get site plan documents for a postcode area",
        "UK postcode for site plan documents",
        "documents",
    ),
    # Account
    Endpoint("get_account_credits", "/account/credits", "Get current API account credits and usage", (), "account"),
    Endpoint("get_account_documents", "/account/documents", "Get account documents and downloads", (), "account"),
)


def input_schema(endpoint: Endpoint) -> Dict[str, Any]:
    schema: Dict[str, Any] = {
        "type": "object",
        "properties": {
            p.key: {"type": p.kind, "description": p.description} for p in endpoint.params
        },
    }
    required = endpoint.required_keys
    if required:
        schema["required"] = required
    return schema


def to_tool(endpoint: Endpoint) -> types.Tool:
    return types.Tool(
        name=endpoint.name,
        description=endpoint.description,
        inputSchema=input_schema(endpoint),
    )
