import unittest

from app.constants.economics import YIELD_LOSS
from app.exceptions import ClientInputError, ErrorCode
from app.services import economics


class TestEconomicImpact(unittest.TestCase):
    def test_tomato_late_blight(self):
        result = economics.compute("Tomato Late Blight", "Tomato", 10, 5.5)
        self.assertEqual(result.severity, "high")
        self.assertEqual(result.yieldLossPct, 60)
        self.assertAlmostEqual(result.potentialYield, 2.2)
        self.assertAlmostEqual(result.yieldLossAmount, 3.3)
        self.assertEqual(result.basePrice, 1.80)
        self.assertAlmostEqual(result.revenueLoss, 5.94)
        self.assertAlmostEqual(result.treatmentCost, 1500)
        self.assertAlmostEqual(result.netLoss, 1505.94)
        self.assertAlmostEqual(result.roi, -99.6)

    def test_healthy_has_no_loss_and_no_roi(self):
        for disease in ("Apple Healthy", "corn HEALTHY", "healthy"):
            with self.subTest(disease=disease):
                result = economics.compute(disease, "Apple", 4, 12)
                self.assertEqual(result.severity, "none")
                self.assertEqual(result.yieldLossPct, 0)
                self.assertEqual(result.treatmentCost, 0)
                self.assertEqual(result.potentialYield, 12)
                self.assertIsNone(result.roi)

    def test_yield_is_conserved(self):
        diseases = {
            "none": "Grape Healthy",
            "low": "Corn Gray Leaf Spot",
            "moderate": "Apple Scab",
            "high": "Grape Black Rot",
        }
        for severity, disease in diseases.items():
            with self.subTest(severity=severity):
                result = economics.compute(disease, "Grape", 3.5, 7.77)
                self.assertEqual(result.severity, severity)
                self.assertEqual(result.yieldLossPct, round(YIELD_LOSS[severity] * 100))
                self.assertAlmostEqual(result.potentialYield + result.yieldLossAmount, 7.77, delta=0.01)

    def test_severity_priority(self):
        self.assertEqual(economics.disease_severity("Healthy Late Blight"), "none")
        self.assertEqual(economics.disease_severity("Potato Late Blight"), "high")
        self.assertEqual(economics.disease_severity("Tomato Bacterial Spot"), "high")
        self.assertEqual(economics.disease_severity("Corn Common Rust"), "moderate")
        self.assertEqual(economics.disease_severity("Grape Esca"), "low")

    def test_unknown_crop_uses_default_price(self):
        self.assertEqual(economics.crop_price("Mango"), 1.0)
        result = economics.compute("Apple Scab", "Mango", 1, 10)
        self.assertAlmostEqual(result.revenueLoss, 3.0)
        self.assertAlmostEqual(result.treatmentCost, 75)

    def test_overflowing_inputs_are_rejected(self):
        with self.assertRaises(ClientInputError) as ctx:
            economics.compute("Tomato Late Blight", "Tomato", 1e308, 5.5)
        self.assertEqual(ctx.exception.status_code, 400)
        self.assertEqual(ctx.exception.error_enum, ErrorCode.INVALID_PAYLOAD)


if __name__ == "__main__":
    unittest.main()
