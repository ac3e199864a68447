"""
Built-in business templates and the business-type catalog.

Templates are written in the JSON interchange format (camelCase keys) and
validated into ProjectTypeSchema objects at import time. Field ids are unique
across all four categories of a template because form values share one flat
value bag.
"""

from __future__ import annotations

from typing import Any

from bizplan.models.schemas import BusinessTypeCategory, ProjectTypeSchema


# ── Business type catalog ────────────────────────────────

_BUSINESS_TYPE_CATEGORIES: list[dict[str, Any]] = [
    {
        "id": "booking",
        "name": "Booking-based",
        "description": "Businesses that rent out time slots, spaces, or equipment",
        "examples": ["Padel courts", "Tennis courts", "Coworking rooms", "Meeting rooms"],
        "icon": "📅",
        "keyMetrics": ["Utilization Rate", "Peak vs Off-Peak Revenue", "Booking Capacity", "Average Session Price"],
        "revenueModel": "time-based",
        "characteristics": ["time_slots", "capacity_utilization", "peak_pricing", "scheduling"],
    },
    {
        "id": "member",
        "name": "Member-based",
        "description": "Subscription or membership-driven businesses",
        "examples": ["Gym", "Club", "SaaS", "Subscription services"],
        "icon": "👥",
        "keyMetrics": ["Member Count", "Churn Rate", "Average Revenue Per User", "Member Lifetime Value"],
        "revenueModel": "subscription",
        "characteristics": ["recurring_revenue", "member_tiers", "retention", "growth_rate"],
    },
    {
        "id": "event",
        "name": "Event-based",
        "description": "Businesses that organize and sell tickets to events",
        "examples": ["Conferences", "Workshops", "Seminars", "Training sessions"],
        "icon": "🎪",
        "keyMetrics": ["Ticket Sales", "Attendance Rate", "Event Capacity", "Revenue per Attendee"],
        "revenueModel": "event-tickets",
        "characteristics": ["ticket_pricing", "event_capacity", "seasonal_events", "speaker_costs"],
    },
    {
        "id": "promotion",
        "name": "Promotion-based",
        "description": "Businesses focused on coupon, discount, or promotion campaigns",
        "examples": ["Coupon platforms", "Deal aggregators", "Promotional campaigns"],
        "icon": "🎟️",
        "keyMetrics": ["Redemption Rate", "Conversion Rate", "Campaign ROI", "Customer Acquisition Cost"],
        "revenueModel": "commission",
        "characteristics": ["redemption_tracking", "campaign_cycles", "partner_commissions", "conversion_funnels"],
    },
    {
        "id": "product",
        "name": "Product-based",
        "description": "Businesses that sell physical or digital products",
        "examples": ["Retail store", "E-commerce", "Manufacturing", "Licensed products"],
        "icon": "📦",
        "keyMetrics": ["Units Sold", "Average Order Value", "Inventory Turnover", "Gross Margin"],
        "revenueModel": "product-sales",
        "characteristics": ["inventory_management", "cost_of_goods", "order_fulfillment", "product_mix"],
    },
    {
        "id": "service",
        "name": "Service-based",
        "description": "Businesses that provide professional or personal services",
        "examples": ["Consulting", "Repairs", "Maintenance contracts", "Personal training"],
        "icon": "🔧",
        "keyMetrics": ["Billable Hours", "Hourly Rate", "Client Retention", "Project Profitability"],
        "revenueModel": "hourly-project",
        "characteristics": ["hourly_billing", "project_based", "consultant_utilization", "client_relationships"],
    },
    {
        "id": "education",
        "name": "Education-based",
        "description": "Educational institutions and training providers",
        "examples": ["Courses", "Training programs", "Schools", "Online education"],
        "icon": "🎓",
        "keyMetrics": ["Student Enrollment", "Course Completion Rate", "Revenue per Student", "Teacher Utilization"],
        "revenueModel": "tuition-fees",
        "characteristics": ["course_curriculum", "student_capacity", "instructor_costs", "certification"],
    },
    {
        "id": "rental",
        "name": "Rental-based",
        "description": "Businesses that rent out assets or equipment long-term",
        "examples": ["Equipment rental", "Property rental", "Vehicle rental", "Asset leasing"],
        "icon": "🏠",
        "keyMetrics": ["Rental Utilization", "Average Rental Duration", "Asset ROI", "Maintenance Costs"],
        "revenueModel": "rental-income",
        "characteristics": ["asset_depreciation", "maintenance_cycles", "rental_duration", "asset_utilization"],
    },
    {
        "id": "hybrid",
        "name": "Hybrid",
        "description": "Businesses that combine multiple revenue models",
        "examples": ["Multi-service businesses", "Internal CapEx projects", "Partnerships", "Investment portfolios"],
        "icon": "🔀",
        "keyMetrics": ["Revenue Mix", "Cross-sell Rate", "Customer Segment Value", "Model Efficiency"],
        "revenueModel": "mixed",
        "characteristics": ["multiple_revenue_streams", "cross_selling", "segment_analysis", "model_optimization"],
    },
]


# ── Templates ────────────────────────────────────────────

_DEFAULT_PROJECT_TYPES: list[dict[str, Any]] = [
    {
        "id": "padel",
        "name": "Padel Club",
        "description": "Padel court business with rental and coaching services",
        "icon": "🏸",
        "businessType": "booking",
        "categories": {
            "investment": [
                {"id": "ground", "name": "Ground Cost", "type": "currency", "defaultValue": 50000, "unit": "€", "group": "Infrastructure"},
                {"id": "structure", "name": "Structure Cost", "type": "currency", "defaultValue": 120000, "unit": "€", "group": "Infrastructure"},
                {"id": "courts", "name": "Number of Courts", "type": "number", "defaultValue": 3, "min": 1, "unit": "courts", "group": "Equipment"},
                {"id": "courtCost", "name": "Per Court Cost", "type": "currency", "defaultValue": 18000, "unit": "€", "group": "Equipment", "unitMultiplier": "courts"},
                {"id": "amenities", "name": "Amenities", "type": "currency", "defaultValue": 20000, "unit": "€", "group": "Infrastructure"},
            ],
            "revenue": [
                {"id": "peakHours", "name": "Peak Hours/Day", "type": "number", "defaultValue": 4, "min": 0, "max": 12, "unit": "hours", "group": "Peak Time"},
                {"id": "peakRate", "name": "Peak Rate", "type": "currency", "defaultValue": 40, "unit": "€/hour", "group": "Peak Time"},
                {"id": "peakUtil", "name": "Peak Utilization", "type": "percentage", "defaultValue": 70, "min": 0, "max": 100, "unit": "%", "group": "Peak Time"},
                {"id": "offHours", "name": "Off Hours/Day", "type": "number", "defaultValue": 2, "min": 0, "max": 12, "unit": "hours", "group": "Off-Peak Time"},
                {"id": "offRate", "name": "Off Rate", "type": "currency", "defaultValue": 25, "unit": "€/hour", "group": "Off-Peak Time"},
                {"id": "offUtil", "name": "Off Utilization", "type": "percentage", "defaultValue": 35, "min": 0, "max": 100, "unit": "%", "group": "Off-Peak Time"},
                {"id": "days", "name": "Days/Week", "type": "number", "defaultValue": 7, "min": 1, "max": 7, "unit": "days", "group": "Schedule"},
                {"id": "weeks", "name": "Weeks/Year", "type": "number", "defaultValue": 52, "min": 1, "max": 53, "unit": "weeks", "group": "Schedule"},
            ],
            "operating": [
                {"id": "utilities", "name": "Utilities/year", "type": "currency", "defaultValue": 5000, "unit": "€", "group": "Fixed Costs"},
                {"id": "insurance", "name": "Insurance/year", "type": "currency", "defaultValue": 2500, "unit": "€", "group": "Fixed Costs"},
                {"id": "maintenance", "name": "Maintenance/year", "type": "currency", "defaultValue": 3000, "unit": "€", "group": "Variable Costs"},
                {"id": "marketing", "name": "Marketing/year", "type": "currency", "defaultValue": 4000, "unit": "€", "group": "Variable Costs"},
                {"id": "admin", "name": "Admin/year", "type": "currency", "defaultValue": 3500, "unit": "€", "group": "Fixed Costs"},
                {"id": "cleaning", "name": "Cleaning/year", "type": "currency", "defaultValue": 2000, "unit": "€", "group": "Variable Costs"},
                {"id": "misc", "name": "Misc/year", "type": "currency", "defaultValue": 1000, "unit": "€", "group": "Variable Costs"},
            ],
            "staffing": [
                {"id": "ftMgr", "name": "Full-time Manager", "type": "number", "defaultValue": 1, "unit": "people", "group": "Management"},
                {"id": "ftMgrSal", "name": "FT Mgr Salary", "type": "currency", "defaultValue": 35000, "unit": "€/year", "group": "Management"},
                {"id": "ftRec", "name": "Full-time Reception", "type": "number", "defaultValue": 1, "unit": "people", "group": "Front Office"},
                {"id": "ftRecSal", "name": "FT Rec Salary", "type": "currency", "defaultValue": 21000, "unit": "€/year", "group": "Front Office"},
                {"id": "ftCoach", "name": "Full-time Coach", "type": "number", "defaultValue": 1, "unit": "people", "group": "Coaching"},
                {"id": "ftCoachSal", "name": "FT Coach Salary", "type": "currency", "defaultValue": 25000, "unit": "€/year", "group": "Coaching"},
                {"id": "ptCoach", "name": "Part-time Coach", "type": "number", "defaultValue": 1, "unit": "people", "group": "Coaching"},
                {"id": "ptCoachSal", "name": "PT Coach Salary", "type": "currency", "defaultValue": 12000, "unit": "€/year", "group": "Coaching"},
                {"id": "addStaff", "name": "Additional Staff", "type": "number", "defaultValue": 0, "unit": "people", "group": "Other"},
                {"id": "addStaffSal", "name": "Add Staff Salary", "type": "currency", "defaultValue": 0, "unit": "€/year", "group": "Other"},
            ],
        },
    },
    {
        "id": "gym",
        "name": "Gym/Fitness Center",
        "description": "Fitness facility with membership-based revenue model",
        "icon": "💪",
        "businessType": "member",
        "categories": {
            "investment": [
                {"id": "equipment", "name": "Equipment", "type": "currency", "defaultValue": 35000, "unit": "€", "group": "Equipment"},
                {"id": "flooring", "name": "Flooring", "type": "currency", "defaultValue": 8000, "unit": "€", "group": "Infrastructure"},
                {"id": "amenities", "name": "Amenities", "type": "currency", "defaultValue": 6000, "unit": "€", "group": "Infrastructure"},
            ],
            "revenue": [
                {"id": "weekMembers", "name": "Weekly Members", "type": "number", "defaultValue": 60, "unit": "members", "group": "Memberships"},
                {"id": "weekFee", "name": "Weekly Fee", "type": "currency", "defaultValue": 20, "unit": "€/week", "group": "Memberships"},
                {"id": "monthMembers", "name": "Monthly Members", "type": "number", "defaultValue": 30, "unit": "members", "group": "Memberships"},
                {"id": "monthFee", "name": "Monthly Fee", "type": "currency", "defaultValue": 50, "unit": "€/month", "group": "Memberships"},
                {"id": "annualMembers", "name": "Annual Members", "type": "number", "defaultValue": 12, "unit": "members", "group": "Memberships"},
                {"id": "annualFee", "name": "Annual Fee", "type": "currency", "defaultValue": 450, "unit": "€/year", "group": "Memberships"},
                {"id": "rampUp", "name": "Apply Ramp-Up", "type": "boolean", "defaultValue": False, "group": "Growth"},
                {"id": "rampDuration", "name": "Ramp Duration", "type": "number", "defaultValue": 3, "min": 0, "max": 12, "unit": "months", "group": "Growth"},
                {"id": "rampEffect", "name": "Ramp Effect", "type": "percentage", "defaultValue": 40, "min": 0, "max": 100, "unit": "%", "group": "Growth"},
            ],
            "operating": [
                {"id": "utilities", "name": "Utilities/year", "type": "currency", "defaultValue": 2500, "unit": "€", "group": "Fixed Costs"},
                {"id": "insurance", "name": "Insurance/year", "type": "currency", "defaultValue": 1700, "unit": "€", "group": "Fixed Costs"},
                {"id": "maintenance", "name": "Maintenance/year", "type": "currency", "defaultValue": 2000, "unit": "€", "group": "Variable Costs"},
                {"id": "marketing", "name": "Marketing/year", "type": "currency", "defaultValue": 2500, "unit": "€", "group": "Variable Costs"},
                {"id": "admin", "name": "Admin/year", "type": "currency", "defaultValue": 2100, "unit": "€", "group": "Fixed Costs"},
                {"id": "cleaning", "name": "Cleaning/year", "type": "currency", "defaultValue": 1200, "unit": "€", "group": "Variable Costs"},
                {"id": "misc", "name": "Misc/year", "type": "currency", "defaultValue": 800, "unit": "€", "group": "Variable Costs"},
            ],
            "staffing": [
                {"id": "ftTrainer", "name": "Full-time Trainer", "type": "number", "defaultValue": 1, "unit": "people", "group": "Training"},
                {"id": "ftTrainerSal", "name": "FT Trainer Salary", "type": "currency", "defaultValue": 22000, "unit": "€/year", "group": "Training"},
                {"id": "ptTrainer", "name": "Part-time Trainer", "type": "number", "defaultValue": 1, "unit": "people", "group": "Training"},
                {"id": "ptTrainerSal", "name": "PT Trainer Salary", "type": "currency", "defaultValue": 9000, "unit": "€/year", "group": "Training"},
                {"id": "addStaff", "name": "Additional Staff", "type": "number", "defaultValue": 0, "unit": "people", "group": "Other"},
                {"id": "addStaffSal", "name": "Add Staff Salary", "type": "currency", "defaultValue": 0, "unit": "€/year", "group": "Other"},
            ],
        },
    },
    {
        "id": "conference",
        "name": "Conference/Event",
        "description": "Event-based business with ticket sales and venue management",
        "icon": "🎪",
        "businessType": "event",
        "categories": {
            "investment": [
                {"id": "venueSetup", "name": "Venue Setup", "type": "currency", "defaultValue": 15000, "unit": "€", "group": "Infrastructure"},
                {"id": "avEquipment", "name": "AV Equipment", "type": "currency", "defaultValue": 8000, "unit": "€", "group": "Equipment"},
                {"id": "technology", "name": "Technology Platform", "type": "currency", "defaultValue": 5000, "unit": "€", "group": "Technology"},
            ],
            "revenue": [
                {"id": "capacity", "name": "Event Capacity", "type": "number", "defaultValue": 200, "unit": "attendees", "group": "Event Specs"},
                {"id": "ticketPrice", "name": "Average Ticket Price", "type": "currency", "defaultValue": 150, "unit": "€", "group": "Pricing"},
                {"id": "occupancyRate", "name": "Expected Occupancy", "type": "percentage", "defaultValue": 80, "min": 0, "max": 100, "unit": "%", "group": "Attendance"},
                {"id": "eventsPerYear", "name": "Events per Year", "type": "number", "defaultValue": 12, "min": 0, "unit": "events", "group": "Schedule"},
                {"id": "sponsorship", "name": "Sponsorship Revenue", "type": "currency", "defaultValue": 10000, "unit": "€/year", "group": "Additional Revenue"},
            ],
            "operating": [
                {"id": "venueRental", "name": "Venue Rental/year", "type": "currency", "defaultValue": 24000, "unit": "€", "group": "Fixed Costs"},
                {"id": "catering", "name": "Catering/event", "type": "currency", "defaultValue": 2000, "unit": "€", "group": "Variable Costs", "perEvent": True},
                {"id": "marketing", "name": "Marketing/year", "type": "currency", "defaultValue": 8000, "unit": "€", "group": "Variable Costs"},
                {"id": "insurance", "name": "Insurance/year", "type": "currency", "defaultValue": 2000, "unit": "€", "group": "Fixed Costs"},
                {"id": "materials", "name": "Materials/event", "type": "currency", "defaultValue": 500, "unit": "€", "group": "Variable Costs", "perEvent": True},
            ],
            "staffing": [
                {"id": "eventManager", "name": "Event Manager", "type": "number", "defaultValue": 1, "unit": "people", "group": "Management", "perEvent": False},
                {"id": "eventManagerSal", "name": "Event Manager Salary", "type": "currency", "defaultValue": 40000, "unit": "€/year", "group": "Management", "perEvent": False},
                {"id": "speakerFees", "name": "Speaker Fees/event", "type": "currency", "defaultValue": 3000, "unit": "€", "group": "Speakers", "role": "flat", "perEvent": True},
                {"id": "supportStaff", "name": "Support Staff/event", "type": "number", "defaultValue": 3, "unit": "people", "group": "Operations", "roleKey": "support", "perEvent": True},
                {"id": "supportSal", "name": "Support Staff Cost/event", "type": "currency", "defaultValue": 800, "unit": "€", "group": "Operations", "perEvent": True},
            ],
        },
    },
    {
        "id": "saas",
        "name": "SaaS Platform",
        "description": "Software as a Service with subscription-based revenue",
        "icon": "💻",
        "businessType": "member",
        "categories": {
            "investment": [
                {"id": "development", "name": "Initial Development", "type": "currency", "defaultValue": 50000, "unit": "€", "group": "Technology"},
                {"id": "infrastructure", "name": "Cloud Infrastructure", "type": "currency", "defaultValue": 10000, "unit": "€", "group": "Technology"},
                {"id": "licenses", "name": "Software Licenses", "type": "currency", "defaultValue": 5000, "unit": "€", "group": "Technology"},
            ],
            "revenue": [
                {"id": "basicUsers", "name": "Basic Plan Users", "type": "number", "defaultValue": 100, "unit": "users", "group": "Subscriptions"},
                {"id": "basicPrice", "name": "Basic Plan Price", "type": "currency", "defaultValue": 29, "unit": "€/month", "group": "Subscriptions"},
                {"id": "proUsers", "name": "Pro Plan Users", "type": "number", "defaultValue": 50, "unit": "users", "group": "Subscriptions"},
                {"id": "proPrice", "name": "Pro Plan Price", "type": "currency", "defaultValue": 79, "unit": "€/month", "group": "Subscriptions"},
                {"id": "enterpriseUsers", "name": "Enterprise Plan Users", "type": "number", "defaultValue": 10, "unit": "users", "group": "Subscriptions"},
                {"id": "enterprisePrice", "name": "Enterprise Plan Price", "type": "currency", "defaultValue": 199, "unit": "€/month", "group": "Subscriptions"},
                {"id": "churnRate", "name": "Monthly Churn Rate", "type": "percentage", "defaultValue": 5, "min": 0, "max": 100, "unit": "%", "group": "Retention"},
                {"id": "growthRate", "name": "Monthly Growth Rate", "type": "percentage", "defaultValue": 10, "min": 0, "unit": "%", "group": "Growth", "description": "Informational; not applied to first-year revenue"},
            ],
            "operating": [
                {"id": "hosting", "name": "Hosting/year", "type": "currency", "defaultValue": 24000, "unit": "€", "group": "Technology"},
                {"id": "customerSupport", "name": "Customer Support/year", "type": "currency", "defaultValue": 15000, "unit": "€", "group": "Operations"},
                {"id": "marketing", "name": "Marketing/year", "type": "currency", "defaultValue": 20000, "unit": "€", "group": "Growth"},
                {"id": "maintenance", "name": "Maintenance/year", "type": "currency", "defaultValue": 8000, "unit": "€", "group": "Technology"},
            ],
            "staffing": [
                {"id": "developers", "name": "Developers", "type": "number", "defaultValue": 2, "unit": "people", "group": "Development", "roleKey": "developer"},
                {"id": "developerSal", "name": "Developer Salary", "type": "currency", "defaultValue": 60000, "unit": "€/year", "group": "Development"},
                {"id": "customer", "name": "Customer Success", "type": "number", "defaultValue": 1, "unit": "people", "group": "Operations"},
                {"id": "customerSal", "name": "Customer Success Salary", "type": "currency", "defaultValue": 45000, "unit": "€/year", "group": "Operations"},
            ],
        },
    },
    {
        "id": "ecommerce",
        "name": "E-commerce Store",
        "description": "Online retail business with product sales",
        "icon": "🛒",
        "businessType": "product",
        "categories": {
            "investment": [
                {"id": "website", "name": "Website Development", "type": "currency", "defaultValue": 15000, "unit": "€", "group": "Technology"},
                {"id": "inventory", "name": "Initial Inventory", "type": "currency", "defaultValue": 30000, "unit": "€", "group": "Inventory"},
                {"id": "warehouseSetup", "name": "Warehouse Setup", "type": "currency", "defaultValue": 10000, "unit": "€", "group": "Infrastructure"},
            ],
            "revenue": [
                {"id": "avgOrderValue", "name": "Average Order Value", "type": "currency", "defaultValue": 75, "unit": "€", "group": "Sales"},
                {"id": "ordersPerMonth", "name": "Orders per Month", "type": "number", "defaultValue": 500, "unit": "orders", "group": "Sales"},
                {"id": "grossMargin", "name": "Gross Margin", "type": "percentage", "defaultValue": 40, "min": 0, "max": 100, "unit": "%", "group": "Profitability"},
                {"id": "returnRate", "name": "Return Rate", "type": "percentage", "defaultValue": 8, "min": 0, "max": 100, "unit": "%", "group": "Operations"},
            ],
            "operating": [
                {"id": "hosting", "name": "Website Hosting/year", "type": "currency", "defaultValue": 2000, "unit": "€", "group": "Technology"},
                {"id": "shipping", "name": "Shipping Costs/year", "type": "currency", "defaultValue": 8000, "unit": "€", "group": "Logistics"},
                {"id": "paymentProcessing", "name": "Payment Processing/year", "type": "currency", "defaultValue": 3000, "unit": "€", "group": "Financial"},
                {"id": "marketing", "name": "Digital Marketing/year", "type": "currency", "defaultValue": 15000, "unit": "€", "group": "Marketing"},
                {"id": "warehouseCosts", "name": "Warehouse Costs/year", "type": "currency", "defaultValue": 12000, "unit": "€", "group": "Logistics"},
            ],
            "staffing": [
                {"id": "manager", "name": "Store Manager", "type": "number", "defaultValue": 1, "unit": "people", "group": "Management"},
                {"id": "managerSal", "name": "Manager Salary", "type": "currency", "defaultValue": 35000, "unit": "€/year", "group": "Management"},
                {"id": "fulfillment", "name": "Fulfillment Staff", "type": "number", "defaultValue": 2, "unit": "people", "group": "Operations"},
                {"id": "fulfillmentSal", "name": "Fulfillment Salary", "type": "currency", "defaultValue": 25000, "unit": "€/year", "group": "Operations"},
            ],
        },
    },
    {
        "id": "consulting",
        "name": "Consulting Services",
        "description": "Professional services with hourly or project-based billing",
        "icon": "💼",
        "businessType": "service",
        "categories": {
            "investment": [
                {"id": "officeSetup", "name": "Office Setup", "type": "currency", "defaultValue": 8000, "unit": "€", "group": "Infrastructure"},
                {"id": "equipment", "name": "Equipment & Software", "type": "currency", "defaultValue": 5000, "unit": "€", "group": "Technology"},
                {"id": "certification", "name": "Certifications", "type": "currency", "defaultValue": 3000, "unit": "€", "group": "Professional"},
            ],
            "revenue": [
                {"id": "hourlyRate", "name": "Hourly Rate", "type": "currency", "defaultValue": 120, "unit": "€/hour", "group": "Pricing"},
                {"id": "billableHours", "name": "Billable Hours/week", "type": "number", "defaultValue": 30, "unit": "hours", "group": "Utilization"},
                {"id": "utilizationRate", "name": "Utilization Rate", "type": "percentage", "defaultValue": 75, "min": 0, "max": 100, "unit": "%", "group": "Utilization"},
                {"id": "weeksPerYear", "name": "Working Weeks/year", "type": "number", "defaultValue": 48, "min": 0, "max": 52, "unit": "weeks", "group": "Schedule"},
            ],
            "operating": [
                {"id": "officeRent", "name": "Office Rent/year", "type": "currency", "defaultValue": 8000, "unit": "€", "group": "Fixed Costs"},
                {"id": "insurance", "name": "Professional Insurance/year", "type": "currency", "defaultValue": 2500, "unit": "€", "group": "Fixed Costs"},
                {"id": "marketing", "name": "Marketing/year", "type": "currency", "defaultValue": 5000, "unit": "€", "group": "Business Development"},
                {"id": "professionalDevelopment", "name": "Professional Development/year", "type": "currency", "defaultValue": 3000, "unit": "€", "group": "Professional"},
                {"id": "equipmentMaintenance", "name": "Equipment Maintenance/year", "type": "currency", "defaultValue": 1000, "unit": "€", "group": "Operations"},
            ],
            "staffing": [
                {"id": "consultant", "name": "Senior Consultants", "type": "number", "defaultValue": 1, "unit": "people", "group": "Consultants"},
                {"id": "consultantSal", "name": "Consultant Salary", "type": "currency", "defaultValue": 70000, "unit": "€/year", "group": "Consultants"},
                {"id": "junior", "name": "Junior Consultants", "type": "number", "defaultValue": 1, "unit": "people", "group": "Consultants"},
                {"id": "juniorSal", "name": "Junior Salary", "type": "currency", "defaultValue": 40000, "unit": "€/year", "group": "Consultants"},
            ],
        },
    },
    {
        "id": "workshop",
        "name": "Training Workshops",
        "description": "Course and workshop provider with tuition-based revenue",
        "icon": "🎓",
        "businessType": "education",
        "categories": {
            "investment": [
                {"id": "classroom", "name": "Classroom Fit-out", "type": "currency", "defaultValue": 12000, "unit": "€", "group": "Infrastructure"},
                {"id": "teachingMaterials", "name": "Teaching Materials", "type": "currency", "defaultValue": 4000, "unit": "€", "group": "Materials"},
                {"id": "learningPlatform", "name": "Learning Platform", "type": "currency", "defaultValue": 6000, "unit": "€", "group": "Technology"},
            ],
            "revenue": [
                {"id": "studentCapacity", "name": "Students per Session", "type": "number", "defaultValue": 20, "unit": "students", "group": "Capacity"},
                {"id": "tuitionFee", "name": "Tuition Fee", "type": "currency", "defaultValue": 350, "unit": "€/student", "group": "Pricing"},
                {"id": "sessionsPerYear", "name": "Sessions per Year", "type": "number", "defaultValue": 10, "unit": "sessions", "group": "Schedule"},
                {"id": "occupancyRate", "name": "Enrollment Rate", "type": "percentage", "defaultValue": 75, "min": 0, "max": 100, "unit": "%", "group": "Capacity"},
            ],
            "operating": [
                {"id": "roomRental", "name": "Room Rental/year", "type": "currency", "defaultValue": 9000, "unit": "€", "group": "Fixed Costs"},
                {"id": "courseMaterials", "name": "Course Materials/year", "type": "currency", "defaultValue": 3000, "unit": "€", "group": "Variable Costs"},
                {"id": "marketing", "name": "Marketing/year", "type": "currency", "defaultValue": 4000, "unit": "€", "group": "Variable Costs"},
                {"id": "insurance", "name": "Insurance/year", "type": "currency", "defaultValue": 1000, "unit": "€", "group": "Fixed Costs"},
            ],
            "staffing": [
                {"id": "instructor", "name": "Instructors", "type": "number", "defaultValue": 1, "unit": "people", "group": "Teaching"},
                {"id": "instructorSal", "name": "Instructor Salary", "type": "currency", "defaultValue": 30000, "unit": "€/year", "group": "Teaching"},
                {"id": "assistant", "name": "Teaching Assistants", "type": "number", "defaultValue": 0, "unit": "people", "group": "Teaching"},
                {"id": "assistantSal", "name": "Assistant Salary", "type": "currency", "defaultValue": 15000, "unit": "€/year", "group": "Teaching"},
            ],
        },
    },
    {
        "id": "fleet",
        "name": "Vehicle Rental Fleet",
        "description": "Daily vehicle rental with a managed fleet",
        "icon": "🚗",
        "businessType": "rental",
        "categories": {
            "investment": [
                {"id": "vehicles", "name": "Number of Vehicles", "type": "number", "defaultValue": 10, "min": 0, "unit": "vehicles", "group": "Fleet"},
                {"id": "vehicleCost", "name": "Cost per Vehicle", "type": "currency", "defaultValue": 25000, "unit": "€", "group": "Fleet", "unitMultiplier": "vehicles"},
                {"id": "depot", "name": "Depot Setup", "type": "currency", "defaultValue": 15000, "unit": "€", "group": "Infrastructure"},
            ],
            "revenue": [
                {"id": "dailyRate", "name": "Daily Rental Rate", "type": "currency", "defaultValue": 55, "unit": "€/day", "group": "Pricing"},
                {"id": "utilizationRate", "name": "Fleet Utilization", "type": "percentage", "defaultValue": 65, "min": 0, "max": 100, "unit": "%", "group": "Utilization"},
            ],
            "operating": [
                {"id": "fleetInsurance", "name": "Fleet Insurance/year", "type": "currency", "defaultValue": 12000, "unit": "€", "group": "Fixed Costs"},
                {"id": "maintenance", "name": "Maintenance/year", "type": "currency", "defaultValue": 9000, "unit": "€", "group": "Variable Costs"},
                {"id": "parking", "name": "Parking/year", "type": "currency", "defaultValue": 6000, "unit": "€", "group": "Fixed Costs"},
                {"id": "marketing", "name": "Marketing/year", "type": "currency", "defaultValue": 4000, "unit": "€", "group": "Variable Costs"},
            ],
            "staffing": [
                {"id": "fleetManager", "name": "Fleet Manager", "type": "number", "defaultValue": 1, "unit": "people", "group": "Management"},
                {"id": "fleetManagerSal", "name": "Fleet Manager Salary", "type": "currency", "defaultValue": 38000, "unit": "€/year", "group": "Management"},
                {"id": "mechanic", "name": "Mechanics", "type": "number", "defaultValue": 1, "unit": "people", "group": "Operations"},
                {"id": "mechanicSal", "name": "Mechanic Salary", "type": "currency", "defaultValue": 30000, "unit": "€/year", "group": "Operations"},
            ],
        },
    },
    {
        "id": "coupon",
        "name": "Coupon Platform",
        "description": "Deal platform earning commission on redeemed merchant offers",
        "icon": "🎟️",
        "businessType": "promotion",
        "categories": {
            "investment": [
                {"id": "platform", "name": "Platform Development", "type": "currency", "defaultValue": 40000, "unit": "€", "group": "Technology"},
                {"id": "salesCollateral", "name": "Sales Collateral", "type": "currency", "defaultValue": 5000, "unit": "€", "group": "Marketing"},
            ],
            "revenue": [
                {"id": "merchants", "name": "Partner Merchants", "type": "number", "defaultValue": 120, "unit": "merchants", "group": "Network"},
                {"id": "dealsPerMonth", "name": "Deals per Merchant/month", "type": "number", "defaultValue": 6, "unit": "deals", "group": "Network"},
                {"id": "redemptionRate", "name": "Redemption Rate", "type": "percentage", "defaultValue": 25, "min": 0, "max": 100, "unit": "%", "group": "Conversion"},
                {"id": "avgDealValue", "name": "Average Deal Value", "type": "currency", "defaultValue": 45, "unit": "€", "group": "Pricing"},
                {"id": "commissionRate", "name": "Commission Rate", "type": "percentage", "defaultValue": 25, "min": 0, "max": 100, "unit": "%", "group": "Pricing"},
            ],
            "operating": [
                {"id": "hosting", "name": "Hosting/year", "type": "currency", "defaultValue": 3000, "unit": "€", "group": "Technology"},
                {"id": "marketing", "name": "Consumer Marketing/year", "type": "currency", "defaultValue": 12000, "unit": "€", "group": "Marketing"},
                {"id": "paymentFees", "name": "Payment Fees/year", "type": "currency", "defaultValue": 1500, "unit": "€", "group": "Financial"},
            ],
            "staffing": [
                {"id": "salesRep", "name": "Sales Representatives", "type": "number", "defaultValue": 1, "unit": "people", "group": "Sales"},
                {"id": "salesRepSal", "name": "Sales Rep Salary", "type": "currency", "defaultValue": 32000, "unit": "€/year", "group": "Sales"},
                {"id": "support", "name": "Merchant Support", "type": "number", "defaultValue": 0, "unit": "people", "group": "Operations"},
                {"id": "supportSal", "name": "Support Salary", "type": "currency", "defaultValue": 26000, "unit": "€/year", "group": "Operations"},
            ],
        },
    },
    {
        "id": "realestate",
        "name": "Rental Property",
        "description": "Residential property let to tenants",
        "icon": "🏘️",
        "businessType": "rental",
        "categories": {
            "investment": [
                {"id": "purchasePrice", "name": "Purchase Price", "type": "currency", "defaultValue": 250000, "unit": "€", "group": "Acquisition"},
                {"id": "renovation", "name": "Renovation", "type": "currency", "defaultValue": 30000, "unit": "€", "group": "Acquisition"},
                {"id": "closingCosts", "name": "Closing Costs", "type": "currency", "defaultValue": 8000, "unit": "€", "group": "Acquisition"},
            ],
            "revenue": [
                {"id": "monthlyRent", "name": "Monthly Rent", "type": "currency", "defaultValue": 1800, "unit": "€/month", "group": "Rent"},
                {"id": "occupancyRate", "name": "Occupancy Rate", "type": "percentage", "defaultValue": 92, "min": 0, "max": 100, "unit": "%", "group": "Rent"},
                {"id": "rentIncrease", "name": "Annual Rent Increase", "type": "percentage", "defaultValue": 3, "min": 0, "unit": "%", "group": "Rent", "description": "Applied mid-year, so half of it counts in year one"},
                {"id": "otherIncome", "name": "Other Income/year", "type": "currency", "defaultValue": 1200, "unit": "€", "group": "Additional Revenue"},
            ],
            "operating": [
                {"id": "propertyTax", "name": "Property Tax/year", "type": "currency", "defaultValue": 2500, "unit": "€", "group": "Fixed Costs"},
                {"id": "insurance", "name": "Insurance/year", "type": "currency", "defaultValue": 1200, "unit": "€", "group": "Fixed Costs"},
                {"id": "maintenance", "name": "Maintenance/year", "type": "currency", "defaultValue": 1800, "unit": "€", "group": "Variable Costs"},
                {"id": "utilities", "name": "Landlord Utilities/year", "type": "currency", "defaultValue": 600, "unit": "€", "group": "Variable Costs"},
            ],
            "staffing": [
                {"id": "propertyManager", "name": "Use Property Manager", "type": "boolean", "defaultValue": True, "group": "Management"},
                {"id": "managementFee", "name": "Management Fee", "type": "percentage", "defaultValue": 8, "min": 0, "max": 100, "unit": "% of rent", "group": "Management"},
                {"id": "handymanHours", "name": "Handyman Hours/month", "type": "number", "defaultValue": 4, "min": 0, "unit": "hours", "group": "Maintenance"},
                {"id": "handymanRate", "name": "Handyman Rate", "type": "currency", "defaultValue": 30, "unit": "€/hour", "group": "Maintenance"},
            ],
        },
    },
    {
        "id": "capex",
        "name": "CapEx Project",
        "description": "Internal capital project delivering savings and new revenue after go-live",
        "icon": "🏗️",
        "businessType": "hybrid",
        "categories": {
            "investment": [
                {"id": "hardware", "name": "Hardware", "type": "currency", "defaultValue": 80000, "unit": "€", "group": "Assets"},
                {"id": "software", "name": "Software", "type": "currency", "defaultValue": 40000, "unit": "€", "group": "Assets"},
                {"id": "integration", "name": "Integration", "type": "currency", "defaultValue": 20000, "unit": "€", "group": "Services"},
                {"id": "training", "name": "Training", "type": "currency", "defaultValue": 5000, "unit": "€", "group": "Services"},
            ],
            "revenue": [
                {"id": "implementationTime", "name": "Implementation Time", "type": "number", "defaultValue": 4, "min": 0, "max": 24, "unit": "months", "group": "Timeline"},
                {"id": "rampUpPeriod", "name": "Ramp-Up Period", "type": "number", "defaultValue": 2, "min": 0, "max": 24, "unit": "months", "group": "Timeline"},
                {"id": "costSavings", "name": "Annual Cost Savings", "type": "currency", "defaultValue": 60000, "unit": "€/year", "group": "Benefits"},
                {"id": "revenueIncrease", "name": "Annual Revenue Increase", "type": "currency", "defaultValue": 30000, "unit": "€/year", "group": "Benefits"},
            ],
            "operating": [
                {"id": "licenseRenewal", "name": "License Renewal/year", "type": "currency", "defaultValue": 8000, "unit": "€", "group": "Technology"},
                {"id": "supportContract", "name": "Support Contract/year", "type": "currency", "defaultValue": 5000, "unit": "€", "group": "Technology"},
            ],
            "staffing": [
                {"id": "projectManager", "name": "Dedicated Project Manager", "type": "boolean", "defaultValue": True, "group": "Project Team"},
                {"id": "pmRate", "name": "Project Manager Rate", "type": "currency", "defaultValue": 85, "unit": "€/hour", "group": "Project Team"},
                {"id": "pmHours", "name": "Project Manager Hours", "type": "number", "defaultValue": 400, "min": 0, "unit": "hours", "group": "Project Team"},
                {"id": "techRate", "name": "Technical Staff Rate", "type": "currency", "defaultValue": 65, "unit": "€/hour", "group": "Project Team"},
                {"id": "techHours", "name": "Technical Staff Hours", "type": "number", "defaultValue": 600, "min": 0, "unit": "hours", "group": "Project Team"},
                {"id": "ongoingStaff", "name": "Ongoing Staff Cost/year", "type": "currency", "defaultValue": 15000, "unit": "€/year", "group": "Operations"},
            ],
        },
    },
    {
        "id": "subscription",
        "name": "Subscription Box",
        "description": "Monthly subscription box with optional add-on sales",
        "icon": "📬",
        "businessType": "member",
        "categories": {
            "investment": [
                {"id": "packagingDesign", "name": "Packaging Design", "type": "currency", "defaultValue": 8000, "unit": "€", "group": "Product"},
                {"id": "initialStock", "name": "Initial Stock", "type": "currency", "defaultValue": 12000, "unit": "€", "group": "Inventory"},
                {"id": "storefront", "name": "Online Storefront", "type": "currency", "defaultValue": 6000, "unit": "€", "group": "Technology"},
            ],
            "revenue": [
                {"id": "subscribers", "name": "Active Subscribers", "type": "number", "defaultValue": 400, "unit": "subscribers", "group": "Subscriptions"},
                {"id": "monthlyPrice", "name": "Monthly Price", "type": "currency", "defaultValue": 35, "unit": "€/month", "group": "Subscriptions"},
                {"id": "churnRate", "name": "Monthly Churn Rate", "type": "percentage", "defaultValue": 6, "min": 0, "max": 100, "unit": "%", "group": "Retention"},
                {"id": "addOnRevenue", "name": "Add-on Revenue/year", "type": "currency", "defaultValue": 9000, "unit": "€", "group": "Additional Revenue"},
            ],
            "operating": [
                {"id": "productCosts", "name": "Box Contents/year", "type": "currency", "defaultValue": 70000, "unit": "€", "group": "Cost of Goods"},
                {"id": "shipping", "name": "Shipping/year", "type": "currency", "defaultValue": 18000, "unit": "€", "group": "Logistics"},
                {"id": "marketing", "name": "Marketing/year", "type": "currency", "defaultValue": 15000, "unit": "€", "group": "Marketing"},
            ],
            "staffing": [
                {"id": "opsLead", "name": "Operations Lead", "type": "number", "defaultValue": 1, "unit": "people", "group": "Operations"},
                {"id": "opsLeadSal", "name": "Operations Lead Salary", "type": "currency", "defaultValue": 36000, "unit": "€/year", "group": "Operations"},
                {"id": "packer", "name": "Packers", "type": "number", "defaultValue": 1, "unit": "people", "group": "Operations"},
                {"id": "packerSal", "name": "Packer Salary", "type": "currency", "defaultValue": 22000, "unit": "€/year", "group": "Operations"},
            ],
        },
    },
    {
        "id": "licensing",
        "name": "Brand Licensing",
        "description": "Licensing intellectual property for royalties and upfront fees",
        "icon": "™️",
        "businessType": "product",
        "categories": {
            "investment": [
                {"id": "ipDevelopment", "name": "IP Development", "type": "currency", "defaultValue": 60000, "unit": "€", "group": "Intellectual Property"},
                {"id": "legalSetup", "name": "Legal Setup", "type": "currency", "defaultValue": 15000, "unit": "€", "group": "Legal"},
            ],
            "revenue": [
                {"id": "licensees", "name": "Active Licensees", "type": "number", "defaultValue": 8, "unit": "licensees", "group": "Royalties"},
                {"id": "salesPerLicensee", "name": "Sales per Licensee/year", "type": "currency", "defaultValue": 250000, "unit": "€", "group": "Royalties"},
                {"id": "royaltyRate", "name": "Royalty Rate", "type": "percentage", "defaultValue": 5, "min": 0, "max": 100, "unit": "%", "group": "Royalties"},
                {"id": "upfrontFee", "name": "Upfront Fee", "type": "currency", "defaultValue": 10000, "unit": "€/license", "group": "Fees"},
                {"id": "newLicenses", "name": "New Licenses/year", "type": "number", "defaultValue": 3, "unit": "licenses", "group": "Fees"},
            ],
            "operating": [
                {"id": "legalMaintenance", "name": "Legal Maintenance/year", "type": "currency", "defaultValue": 10000, "unit": "€", "group": "Legal"},
                {"id": "brandMarketing", "name": "Brand Marketing/year", "type": "currency", "defaultValue": 12000, "unit": "€", "group": "Marketing"},
                {"id": "royaltyAudits", "name": "Royalty Audits/year", "type": "currency", "defaultValue": 4000, "unit": "€", "group": "Legal"},
            ],
            "staffing": [
                {"id": "licensingManager", "name": "Licensing Manager", "type": "number", "defaultValue": 1, "unit": "people", "group": "Management"},
                {"id": "licensingManagerSal", "name": "Licensing Manager Salary", "type": "currency", "defaultValue": 55000, "unit": "€/year", "group": "Management"},
            ],
        },
    },
    {
        "id": "partnership",
        "name": "Channel Partnership",
        "description": "Revenue share earned through a network of channel partners",
        "icon": "🤝",
        "businessType": "hybrid",
        "categories": {
            "investment": [
                {"id": "integrationSetup", "name": "Integration Setup", "type": "currency", "defaultValue": 25000, "unit": "€", "group": "Technology"},
                {"id": "partnerOnboarding", "name": "Partner Onboarding", "type": "currency", "defaultValue": 10000, "unit": "€", "group": "Partners"},
            ],
            "revenue": [
                {"id": "partners", "name": "Active Partners", "type": "number", "defaultValue": 15, "unit": "partners", "group": "Partners"},
                {"id": "revenuePerPartner", "name": "Partner-generated Revenue/year", "type": "currency", "defaultValue": 80000, "unit": "€", "group": "Partners"},
                {"id": "revenueShare", "name": "Revenue Share", "type": "percentage", "defaultValue": 12, "min": 0, "max": 100, "unit": "%", "group": "Terms"},
            ],
            "operating": [
                {"id": "partnerMarketing", "name": "Partner Marketing/year", "type": "currency", "defaultValue": 15000, "unit": "€", "group": "Marketing"},
                {"id": "partnerTools", "name": "Partner Portal/year", "type": "currency", "defaultValue": 5000, "unit": "€", "group": "Technology"},
            ],
            "staffing": [
                {"id": "partnerManager", "name": "Partner Managers", "type": "number", "defaultValue": 1, "unit": "people", "group": "Partners"},
                {"id": "partnerManagerSal", "name": "Partner Manager Salary", "type": "currency", "defaultValue": 60000, "unit": "€/year", "group": "Partners"},
            ],
        },
    },
    {
        "id": "portfolio",
        "name": "Investment Portfolio",
        "description": "Capital deployed for dividend income and capital gains",
        "icon": "📈",
        "businessType": "hybrid",
        "categories": {
            "investment": [
                {"id": "initialCapital", "name": "Initial Capital", "type": "currency", "defaultValue": 500000, "unit": "€", "group": "Capital"},
                {"id": "transactionCosts", "name": "Transaction Costs", "type": "currency", "defaultValue": 2500, "unit": "€", "group": "Capital"},
            ],
            "revenue": [
                {"id": "portfolioValue", "name": "Average Portfolio Value", "type": "currency", "defaultValue": 500000, "unit": "€", "group": "Portfolio"},
                {"id": "dividendYield", "name": "Dividend Yield", "type": "percentage", "defaultValue": 3, "min": 0, "unit": "%", "group": "Returns"},
                {"id": "capitalGains", "name": "Capital Gains", "type": "percentage", "defaultValue": 5, "unit": "%", "group": "Returns"},
            ],
            "operating": [
                {"id": "custodyFees", "name": "Custody & Management Fees/year", "type": "currency", "defaultValue": 5000, "unit": "€", "group": "Fees"},
                {"id": "research", "name": "Research/year", "type": "currency", "defaultValue": 2000, "unit": "€", "group": "Fees"},
            ],
            "staffing": [
                {"id": "analyst", "name": "Analysts", "type": "number", "defaultValue": 0, "unit": "people", "group": "Research"},
                {"id": "analystSal", "name": "Analyst Salary", "type": "currency", "defaultValue": 50000, "unit": "€/year", "group": "Research"},
            ],
        },
    },
    {
        "id": "efficiency",
        "name": "Operational Efficiency",
        "description": "Automation programme measured by savings and recovered staff time",
        "icon": "⚙️",
        "businessType": "hybrid",
        "categories": {
            "investment": [
                {"id": "automationTools", "name": "Automation Tools", "type": "currency", "defaultValue": 30000, "unit": "€", "group": "Technology"},
                {"id": "processRedesign", "name": "Process Redesign", "type": "currency", "defaultValue": 15000, "unit": "€", "group": "Services"},
            ],
            "revenue": [
                {"id": "annualCostSavings", "name": "Direct Cost Savings/year", "type": "currency", "defaultValue": 25000, "unit": "€", "group": "Savings"},
                {"id": "employeesAffected", "name": "Employees Affected", "type": "number", "defaultValue": 20, "unit": "people", "group": "Productivity"},
                {"id": "hoursSavedPerWeek", "name": "Hours Saved per Employee/week", "type": "number", "defaultValue": 2, "unit": "hours", "group": "Productivity"},
                {"id": "hourlyCost", "name": "Loaded Hourly Cost", "type": "currency", "defaultValue": 35, "unit": "€/hour", "group": "Productivity"},
                {"id": "weeksPerYear", "name": "Working Weeks/year", "type": "number", "defaultValue": 46, "min": 0, "max": 52, "unit": "weeks", "group": "Productivity"},
            ],
            "operating": [
                {"id": "toolSubscriptions", "name": "Tool Subscriptions/year", "type": "currency", "defaultValue": 9000, "unit": "€", "group": "Technology"},
                {"id": "maintenance", "name": "Maintenance/year", "type": "currency", "defaultValue": 3000, "unit": "€", "group": "Technology"},
            ],
            "staffing": [
                {"id": "processAnalyst", "name": "Process Analysts", "type": "number", "defaultValue": 1, "unit": "people", "group": "Operations"},
                {"id": "processAnalystSal", "name": "Process Analyst Salary", "type": "currency", "defaultValue": 50000, "unit": "€/year", "group": "Operations"},
            ],
        },
    },
    {
        "id": "contract",
        "name": "Maintenance Contracts",
        "description": "Recurring service contracts with annual renewals",
        "icon": "📝",
        "businessType": "service",
        "categories": {
            "investment": [
                {"id": "serviceSetup", "name": "Service Setup", "type": "currency", "defaultValue": 20000, "unit": "€", "group": "Infrastructure"},
                {"id": "diagnosticTools", "name": "Diagnostic Tools", "type": "currency", "defaultValue": 10000, "unit": "€", "group": "Equipment"},
            ],
            "revenue": [
                {"id": "existingContracts", "name": "Existing Contracts", "type": "number", "defaultValue": 40, "unit": "contracts", "group": "Contracts"},
                {"id": "renewalRate", "name": "Renewal Rate", "type": "percentage", "defaultValue": 85, "min": 0, "max": 100, "unit": "%", "group": "Contracts"},
                {"id": "newContracts", "name": "New Contracts/year", "type": "number", "defaultValue": 10, "unit": "contracts", "group": "Contracts"},
                {"id": "annualContractValue", "name": "Annual Contract Value", "type": "currency", "defaultValue": 6000, "unit": "€/contract", "group": "Pricing"},
            ],
            "operating": [
                {"id": "serviceVehicles", "name": "Service Vehicles/year", "type": "currency", "defaultValue": 18000, "unit": "€", "group": "Operations"},
                {"id": "spareParts", "name": "Spare Parts/year", "type": "currency", "defaultValue": 30000, "unit": "€", "group": "Operations"},
                {"id": "insurance", "name": "Liability Insurance/year", "type": "currency", "defaultValue": 4000, "unit": "€", "group": "Fixed Costs"},
            ],
            "staffing": [
                {"id": "technician", "name": "Field Technicians", "type": "number", "defaultValue": 4, "unit": "people", "group": "Field Service"},
                {"id": "technicianSal", "name": "Technician Salary", "type": "currency", "defaultValue": 38000, "unit": "€/year", "group": "Field Service"},
                {"id": "accountManager", "name": "Account Managers", "type": "number", "defaultValue": 1, "unit": "people", "group": "Sales"},
                {"id": "accountManagerSal", "name": "Account Manager Salary", "type": "currency", "defaultValue": 45000, "unit": "€/year", "group": "Sales"},
            ],
        },
    },
    {
        "id": "generic",
        "name": "Generic Business",
        "description": "Customizable business model template",
        "icon": "🏢",
        "businessType": "hybrid",
        "categories": {
            "investment": [
                {"id": "equipment", "name": "Equipment", "type": "currency", "defaultValue": 0, "unit": "€", "group": "Assets"},
                {"id": "infrastructure", "name": "Infrastructure", "type": "currency", "defaultValue": 0, "unit": "€", "group": "Assets"},
                {"id": "otherInvestment", "name": "Other Investments", "type": "currency", "defaultValue": 0, "unit": "€", "group": "Assets"},
            ],
            "revenue": [
                {"id": "primaryRevenue", "name": "Primary Revenue", "type": "currency", "defaultValue": 0, "unit": "€/year", "group": "Income"},
                {"id": "secondaryRevenue", "name": "Secondary Revenue", "type": "currency", "defaultValue": 0, "unit": "€/year", "group": "Income"},
            ],
            "operating": [
                {"id": "utilities", "name": "Utilities", "type": "currency", "defaultValue": 0, "unit": "€/year", "group": "Fixed Costs"},
                {"id": "insurance", "name": "Insurance", "type": "currency", "defaultValue": 0, "unit": "€/year", "group": "Fixed Costs"},
                {"id": "maintenance", "name": "Maintenance", "type": "currency", "defaultValue": 0, "unit": "€/year", "group": "Variable Costs"},
                {"id": "marketing", "name": "Marketing", "type": "currency", "defaultValue": 0, "unit": "€/year", "group": "Variable Costs"},
                {"id": "otherCosts", "name": "Other Costs", "type": "currency", "defaultValue": 0, "unit": "€/year", "group": "Variable Costs"},
            ],
            "staffing": [
                {"id": "management", "name": "Management Staff", "type": "number", "defaultValue": 0, "unit": "people", "group": "Staff"},
                {"id": "managementSal", "name": "Management Salary", "type": "currency", "defaultValue": 0, "unit": "€/year", "group": "Staff"},
                {"id": "operational", "name": "Operational Staff", "type": "number", "defaultValue": 0, "unit": "people", "group": "Staff"},
                {"id": "operationalSal", "name": "Operational Salary", "type": "currency", "defaultValue": 0, "unit": "€/year", "group": "Staff"},
            ],
        },
    },
]


BUSINESS_TYPE_CATEGORIES: dict[str, BusinessTypeCategory] = {
    raw["id"]: BusinessTypeCategory.model_validate(raw)
    for raw in _BUSINESS_TYPE_CATEGORIES
}

BUILTIN_PROJECT_TYPES: dict[str, ProjectTypeSchema] = {
    raw["id"]: ProjectTypeSchema.model_validate(raw)
    for raw in _DEFAULT_PROJECT_TYPES
}
