"""
Bundled catalog data for Wellness Nepal.

Plain dicts so the data can be edited without touching the record classes;
gym_agent.catalog.store turns them into frozen Product records at startup.
"""

COMPANY_DATA = """Wellness Fitness Center (Wellness Nepal) - "Premium Gym Solutions"
Headquarters: Traffic Chowk, Butwal, Nepal
Phone: +977-9800000000 | Email: sales@wellnessnepal.com
Established 2015 | VAT No. 601234567 | SHAKTI CERTIFIED
Track record: 500+ commercial gyms designed, supplied and installed across Nepal.

Build standards: 11-12 gauge industrial steel frames, biomechanically tuned movement paths.

Commercial policies:
- All prices are exclusive of 13% VAT.
- Payment: 50% advance to confirm the order, 50% on delivery.
- Warranty: 10-year structural warranty on Shakti Premium lines; motor and electronics warranties vary by product.
- Logistics: free delivery and installation inside Kathmandu Valley and Butwal Valley; nationwide delivery available at cost.
- Quotations: formal quotations are prepared by our sales team on request.
"""

PRODUCTS_DATA = [
    {
        "name": "Cardio Pro T90",
        "category": "Cardio",
        "description": "Commercial treadmill built for 24/7 gym traffic with a cushioned deck and 15-level incline.",
        "specs": {
            "Motor": "5.0 HP AC Peak",
            "Max User": "180kg",
            "Speed": "1-22 km/h",
            "Running Surface": "160 x 58 cm",
        },
        "warranty": ["5 Years Motor", "10 Years Frame", "2 Years Parts"],
        "shipping": ["Free delivery in Kathmandu & Butwal Valley", "Installation included"],
        "price": "रू 3,25,000",
    },
    {
        "name": "Shakti Multi-Station MS5",
        "category": "Multi-Station",
        "description": "Five-station strength hub with lat pulldown, chest press, leg extension, cable row and ab crunch.",
        "specs": {
            "Weight Stacks": "2 x 100kg",
            "Frame": "11-Gauge steel",
            "Footprint": "420 x 380 cm",
        },
        "warranty": ["10 Years Structural", "1 Year Cables & Pulleys"],
        "shipping": ["Free delivery in Kathmandu & Butwal Valley", "Two-day on-site assembly"],
        "price": "रू 6,80,000",
    },
    {
        "name": "Shakti Functional Trainer FT200",
        "category": "Strength",
        "description": "Dual adjustable pulley functional trainer with pull-up bar, ideal for personal training zones.",
        "specs": {
            "Weight Stacks": "2 x 100kg",
            "Pulley Positions": "20",
            "Frame": "12-Gauge steel",
        },
        "warranty": ["10 Years Structural", "1 Year Cables & Pulleys"],
        "shipping": ["Free delivery in Kathmandu & Butwal Valley", "Installation included"],
        "price": "रू 2,95,000",
    },
    {
        "name": "AirRide Spin Bike S30",
        "category": "Cardio",
        "description": "Magnetic-resistance indoor cycling bike with belt drive for quiet group classes.",
        "specs": {
            "Flywheel": "20kg",
            "Resistance": "Magnetic, 32 levels",
            "Max User": "150kg",
        },
        "warranty": ["3 Years Frame", "1 Year Parts"],
        "shipping": ["Nationwide delivery", "Self-assembly kit"],
        "price": "रू 85,000",
    },
    {
        "name": "Shakti Power Rack PR900",
        "category": "Strength",
        "description": "Full power rack with J-hooks, safety spotter arms and band pegs for heavy barbell work.",
        "specs": {
            "Load Capacity": "450kg",
            "Frame": "11-Gauge steel, 75 x 75 mm uprights",
            "Height": "230 cm",
        },
        "warranty": ["10 Years Structural"],
        "shipping": ["Free delivery in Kathmandu & Butwal Valley", "Installation included"],
        "price": "रू 1,60,000",
    },
    {
        "name": "Elliptical Cross E70",
        "category": "Cardio",
        "description": "Low-impact commercial elliptical with adjustable stride and heart-rate handles.",
        "specs": {
            "Stride": "51-61 cm adjustable",
            "Resistance": "Electromagnetic, 25 levels",
            "Max User": "160kg",
        },
        "warranty": ["5 Years Frame", "2 Years Electronics"],
        "shipping": ["Free delivery in Kathmandu & Butwal Valley"],
        "price": "रू 2,40,000",
    },
    {
        "name": "Smith Machine SM450",
        "category": "Strength",
        "description": "Counter-balanced Smith machine with 7-degree angled guide rods and safety catches.",
        "specs": {
            "Bar Weight": "Counterbalanced to 7kg",
            "Frame": "11-Gauge steel",
            "Load Capacity": "300kg",
        },
        "warranty": ["10 Years Structural", "1 Year Bearings"],
        "shipping": ["Free delivery in Kathmandu & Butwal Valley", "Installation included"],
    },
    {
        "name": "Rowing Ergometer R10",
        "category": "Cardio",
        "description": "Air-resistance rowing machine with performance monitor and folding rail for storage.",
        "specs": {
            "Resistance": "Air + damper 1-10",
            "Rail Length": "245 cm",
            "Max User": "135kg",
        },
        "warranty": ["5 Years Frame", "2 Years Monitor"],
        "shipping": ["Nationwide delivery"],
        "price": "रू 1,10,000",
    },
    {
        "name": "Adjustable Bench AB120",
        "category": "Accessories",
        "description": "Flat-incline-decline bench with seven back positions and transport wheels.",
        "specs": {
            "Positions": "7 back, 3 seat",
            "Load Capacity": "350kg",
            "Frame": "12-Gauge steel",
        },
        "warranty": ["5 Years Frame", "1 Year Upholstery"],
        "shipping": ["Nationwide delivery"],
        "price": "रू 38,000",
    },
    {
        "name": "Rubber Hex Dumbbell Set 2.5-50kg",
        "category": "Free Weights",
        "description": "Twenty pairs of rubber-coated hex dumbbells with chrome knurled handles and a 3-tier rack.",
        "specs": {
            "Range": "2.5kg to 50kg in 2.5kg steps",
            "Rack": "3-tier horizontal",
        },
        "warranty": ["2 Years Coating"],
        "shipping": ["Free delivery in Kathmandu & Butwal Valley"],
        "price": "रू 4,50,000",
    },
    {
        "name": "Leg Press LP800",
        "category": "Strength",
        "description": "45-degree plate-loaded leg press with oversized footplate and linear bearings.",
        "specs": {
            "Max Plate Load": "400kg",
            "Frame": "11-Gauge steel",
        },
        "warranty": ["10 Years Structural", "1 Year Bearings"],
        "shipping": ["Free delivery in Kathmandu & Butwal Valley", "Installation included"],
        "price": "रू 2,10,000",
    },
    {
        "name": "Stair Climber SC60",
        "category": "Cardio",
        "description": "Revolving staircase trainer for high-intensity conditioning in commercial gyms.",
        "specs": {
            "Step Rate": "24-162 steps/min",
            "Max User": "180kg",
        },
        "warranty": ["5 Years Motor", "3 Years Frame"],
        "shipping": ["Free delivery in Kathmandu & Butwal Valley", "Installation included"],
    },
]
