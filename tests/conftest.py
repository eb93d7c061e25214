import json

import pytest

LEE_HTML = """
<html><body>
<a href="/Display/DisplayParcel.aspx?FolioID=10123456">Parcel details</a>
<div id="divDisplayParcelOwner">
  <div class="textPanel"><div>SMITH JOHN &amp; JANE<br/>1418 SE 12TH TER<br/>CAPE CORAL FL 33990</div></div>
</div>
<table>
  <tr><th>Sale Date</th><th>Sale Price</th></tr>
  <tr><td>03/15/2019</td><td>250000</td></tr>
</table>
</body></html>
"""

LEE_HTML_NO_ID = """
<html><body>
<div id="divDisplayParcelOwner">
  <div class="textPanel"><div>GARCIA MARIA<br/>10 MAIN ST<br/>FORT MYERS FL 33901</div></div>
</div>
</body></html>
"""

FORT_BEND_HTML = """
<html><body>
<h3>Property Details For Year 2024</h3>
<table><tr><th>Property ID:</th><td>R123456</td></tr></table>
<table>
  <tr><th colspan="2">January 1 Owner</th></tr>
  <tr><th>Name:</th><td>DOE JANE M</td></tr>
</table>
<div class="panel-heading">Deed History</div>
<table>
  <tr><th>Date</th><th>Type</th><th>Description</th><th>Grantor</th><th>Grantee</th></tr>
  <tr><td>06/01/2010</td><td>WD</td><td>Warranty Deed</td><td>ROE RICHARD</td><td>DOE JANE M</td></tr>
  <tr><td>02/03/2001</td><td>WD</td><td>Warranty Deed</td><td>BUILDER CORP</td><td>ROE RICHARD</td></tr>
</table>
</body></html>
"""

CHARLOTTE_HTML = """
<html><body>
<h1>Property Record Information for 412204376001</h1>
<h2>Owner:</h2>
<div>JONES ROBERT L &amp; MARY<br>123 OAK ST<br>PUNTA GORDA FL 33950</div>
</body></html>
"""

WAKULLA_HTML = """
<html><body>
<div id="ctlBodyPane_ctl01_ctl01_dynamicSummaryData_rptrDynamicColumns_ctl00_pnlSingleValue">
  <span>00-00-001-000-00000-000</span>
</div>
<span id="ctlBodyPane_ctl02_ctl01_rptOwner_ctl00_sprOwnerName1_lnkUpmSearchLinkSuppressed_lblSearch">WILLIAMS TOM</span>
<table id="ctlBodyPane_ctl08_ctl01_grdSales">
  <tbody>
    <tr><td>04/10/2020</td><td>$200,000</td><td>WD</td><td>1</td><td>2</td><td>Q</td><td>I</td><td>BAKER SUE</td><td>WILLIAMS TOM</td></tr>
    <tr><td>01/05/2005</td><td>$90,000</td><td>WD</td><td>3</td><td>4</td><td>Q</td><td>V</td><td>OLD OWNER LLC</td><td>BAKER SUE</td></tr>
  </tbody>
</table>
</body></html>
"""

MIAMI_DADE_RECORD = {
    "PropertyInfo": {"FolioNumber": "30-4022-003-0010"},
    "OwnerInfos": [{"Name": "GARCIA MARIA"}, {"Name": "ACME HOLDINGS LLC"}],
    "SalesInfos": [
        {"DateOfSale": "07/20/2015", "GranteeName1": "GARCIA MARIA", "GranteeName2": ""},
        {"DateOfSale": "", "GranteeName1": "LOPEZ JUAN"},
    ],
}


def person(first, last, middle=None, prefix=None, suffix=None):
    return {
        "type": "person",
        "first_name": first,
        "last_name": last,
        "middle_name": middle,
        "prefix_name": prefix,
        "suffix_name": suffix,
    }


def company(name):
    return {"type": "company", "name": name}


@pytest.fixture
def write_file(tmp_path):
    def _write(name, content):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, (dict, list)):
            content = json.dumps(content)
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def miami_dade_file(write_file):
    return write_file("input.json", MIAMI_DADE_RECORD)
